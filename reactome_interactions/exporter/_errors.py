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
Exceptions raised by the interaction exporter.

Configuration and resolution errors are raised before any traversal
starts.  :class:`EntityModelError` raised while expanding a container is
recovered by the inference engine (the container is skipped); raised
anywhere else it aborts the export.  :class:`ConnectionLostError`, the
model becoming unreachable, always aborts the export.
"""

from __future__ import annotations

__all__ = [
    'ExporterError',
    'ConfigError',
    'ResolutionError',
    'UnknownSpeciesError',
    'UnknownObjectError',
    'EntityModelError',
    'ConnectionLostError',
    'EncodingError',
    'ExportError',
]


class ExporterError(Exception):
    """Base class of all exporter failures."""


class ConfigError(ExporterError, ValueError):
    """Malformed or missing export settings."""


class ResolutionError(ExporterError, LookupError):
    """A root argument could not be resolved by the entity model."""


class UnknownSpeciesError(ResolutionError):
    """Species name not known to the entity model."""

    def __init__(self, name: str):

        super().__init__(f'Unknown species: {name!r}')
        self.name = name


class UnknownObjectError(ResolutionError):
    """Object identifier not known to the entity model."""

    def __init__(self, st_id: str):

        super().__init__(f'Unknown object: {st_id!r}')
        self.st_id = st_id


class EntityModelError(ExporterError):
    """The entity model failed to answer a query."""


class ConnectionLostError(EntityModelError):
    """
    The entity model can no longer be reached.

    Unlike other model failures this is never recovered by skipping a
    container: it aborts the export.
    """


class EncodingError(ExporterError, OSError):
    """An output writer failed to write or finalise its file."""

    def __init__(self, path, reason: BaseException | str):

        super().__init__(f'Cannot write {path}: {reason}')
        self.path = path
        self.reason = reason


class ExportError(ExporterError):
    """One or more outputs of an export run failed."""

    def __init__(self, failures: list[EncodingError]):

        paths = ', '.join(str(f.path) for f in failures)
        super().__init__(f'Export failed for: {paths}')
        self.failures = failures
