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

"""Plain tab-delimited interaction writer."""

from __future__ import annotations

__all__ = ['TsvWriter', 'TSV_COLUMNS']

from typing import TYPE_CHECKING

from ._base import InteractionWriter, identifier, namespace

if TYPE_CHECKING:
    from .._record import Interaction

TSV_COLUMNS = (
    'id_a', 'namespace_a', 'name_a', 'kind_a', 'gene_names_a', 'species_a',
    'id_b', 'namespace_b', 'name_b', 'kind_b', 'gene_names_b', 'species_b',
    'interaction_type', 'role_a', 'role_b',
    'stoichiometry_a', 'stoichiometry_b',
    'context_id', 'context_name', 'context_class',
)


class TsvWriter(InteractionWriter):
    """
    One interaction per line, one attribute per column.

    Multiple gene names are joined by ``|``.  The file is
    ``<prefix>.tab-delimited.txt``.
    """

    suffix = '.tab-delimited.txt'
    header = TSV_COLUMNS

    def fields(self, interaction: Interaction) -> list:

        sides = []

        for entity in (interaction.a, interaction.b):
            sides.extend([
                identifier(entity),
                namespace(entity),
                entity.name,
                entity.kind.value,
                '|'.join(entity.gene_names),
                entity.species,
            ])

        return sides + [
            interaction.interaction_type,
            interaction.role_a,
            interaction.role_b,
            interaction.stoichiometry_a,
            interaction.stoichiometry_b,
            interaction.context_id,
            interaction.context_name,
            interaction.context_class,
        ]
