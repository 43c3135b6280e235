#!/usr/bin/env python

#
# This file is part of the `reactome_interactions` Python module
#
# Copyright 2026
# Heidelberg University Hospital
#
# File author(s): OmniPath Team (omnipathdb@gmail.com)
#
# Distributed under the BSD-3-Clause license
# See the file `LICENSE` or read a copy at
# https://opensource.org/license/bsd-3-clause
#

"""
Interaction exporter.

Infers pairwise interactions from the containers of a Reactome entity
model (complexes, entity sets, polymers and reaction-like events),
deduplicates them and writes them to PSI-MITAB and tab-delimited files.

Usage::

    from reactome_interactions.exporter import (
        MitabWriter,
        Neo4jEntityModel,
        TsvWriter,
        export,
        stream,
    )

    with Neo4jEntityModel('localhost', 'neo4j', 'secret') as model:
        interactions = stream(model, species=['Homo sapiens'])
        export(interactions, [MitabWriter('out'), TsvWriter('out')])

    # Small offline model, into a DataFrame
    from reactome_interactions.exporter import MemoryEntityModel, collect

    model = MemoryEntityModel.from_yaml('model.yaml')
    df = collect(model, objects=['R-HSA-1'], simple_entities_policy='ALL')
"""

__all__ = [
    'CatalystActivity',
    'Deduplicator',
    'Entity',
    'EntityKind',
    'EntityModel',
    'ExportSettings',
    'Interaction',
    'InteractionInference',
    'InteractionStream',
    'MemoryEntityModel',
    'MitabWriter',
    'Neo4jEntityModel',
    'SimpleEntityPolicy',
    'TrivialChemicals',
    'TsvWriter',
    'collect',
    'config',
    'export',
    'participants',
    'resolve_roots',
    'settings',
    'stream',
]

from ._config import ExportSettings, config, settings
from ._dedup import Deduplicator
from ._export import export
from ._infer import InteractionInference
from ._participants import participants
from ._policy import SimpleEntityPolicy, TrivialChemicals
from ._record import CatalystActivity, Entity, EntityKind, Interaction
from ._stream import InteractionStream, collect, resolve_roots, stream
from .model import EntityModel, MemoryEntityModel, Neo4jEntityModel
from .writers import MitabWriter, TsvWriter
