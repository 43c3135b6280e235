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

"""Entity model accessors."""

__all__ = [
    'EntityModel',
    'MemoryEntityModel',
    'Neo4jEntityModel',
    'bolt_uri',
]

from ._base import EntityModel
from .graphdb import Neo4jEntityModel, bolt_uri
from .memory import MemoryEntityModel
