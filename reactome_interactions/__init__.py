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

"""Molecular interactions inferred from Reactome content."""

from ._metadata import __author__, __license__, __version__
