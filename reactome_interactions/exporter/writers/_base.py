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
Line-oriented interaction writers.

A writer owns one output file ``<prefix><suffix>``.  Lines go to
``<prefix><suffix>.partial`` first; :meth:`InteractionWriter.commit`
renames the partial file into place, :meth:`InteractionWriter.discard`
deletes it.  A failed run therefore never leaves a final file behind.
"""

from __future__ import annotations

__all__ = ['InteractionWriter', 'identifier', 'namespace', 'xref']

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING

from .._errors import EncodingError

if TYPE_CHECKING:
    from .._record import Entity, Interaction

_log = logging.getLogger(__name__)

REACTOME = 'reactome'

_NAMESPACES = {
    'uniprot': 'uniprotkb',
    'chebi': 'chebi',
    'ensembl': 'ensembl',
    'mirbase': 'mirbase',
    'embl': 'ddbj/embl/genbank',
    'ncbi nucleotide': 'refseq',
    'pubchem compound': 'pubchem',
    'guide to pharmacology': 'iuphar',
}


# ---------------------------------------------------------------------------
# Interactor identifiers
# ---------------------------------------------------------------------------

def namespace(entity: Entity) -> str:
    """
    Cross-reference namespace of an interactor.

    Containers and entities without a reference use ``reactome``.
    """

    if entity.is_container or not entity.database or not entity.identifier:
        return REACTOME

    db = entity.database.strip().lower()

    return _NAMESPACES.get(db, db.replace(' ', '_'))


def identifier(entity: Entity) -> str:
    """Identifier of an interactor within its :func:`namespace`."""

    ns = namespace(entity)

    if ns == REACTOME:
        return entity.st_id

    if ns == 'chebi':
        return entity.chebi_id

    return entity.identifier


def xref(entity: Entity) -> str:
    """``namespace:identifier`` of an interactor."""
    return f'{namespace(entity)}:{identifier(entity)}'


def _clean(value) -> str:
    """Render a field value on a single line without tabs."""
    if value is None:
        return ''
    return ' '.join(str(value).split())


# ---------------------------------------------------------------------------
# Writer base
# ---------------------------------------------------------------------------

class InteractionWriter:
    """
    Base of the tab separated interaction writers.

    Subclasses set :attr:`suffix` and :attr:`header` and implement
    :meth:`fields`.  Usable as a context manager: the output is
    committed when the block finishes normally and discarded otherwise.

    Args:
        prefix:
            Output path without the format specific suffix.
    """

    suffix = '.txt'
    header: tuple[str, ...] = ()
    missing = ''
    """Placeholder written for empty fields."""

    def __init__(self, prefix: Path | str):

        self.path = Path(f'{prefix}{self.suffix}')
        self.partial = self.path.with_name(f'{self.path.name}.partial')
        self.written = 0
        self._file = None

    def __repr__(self):

        return f'{type(self).__name__}({str(self.path)!r})'

    def __enter__(self):

        return self.open()

    def __exit__(self, exc_type, exc, tb):

        if exc_type is None:
            self.commit()
        else:
            self.discard()

    def fields(self, interaction: Interaction) -> list:
        """Column values of one interaction, in :attr:`header` order."""

        raise NotImplementedError

    def open(self) -> InteractionWriter:
        """
        Create the partial file and write the header.

        Raises:
            EncodingError: If the file cannot be created.
        """

        try:
            self._file = open(self.partial, 'w', encoding='utf-8', newline='\n')

            if self.header:
                self._file.write('\t'.join(self.header) + '\n')

        except OSError as e:
            self._close()
            raise EncodingError(self.path, e) from e

        _log.debug('[interactions] Writing %s.', self.partial)

        return self

    def write(self, interaction: Interaction) -> None:
        """
        Append one interaction line.

        Raises:
            EncodingError: On I/O failure.
            RuntimeError: If the writer is not open.
        """

        if self._file is None:
            raise RuntimeError(f'{self!r} is not open.')

        line = '\t'.join(
            _clean(value) or self.missing
            for value in self.fields(interaction)
        )

        try:
            self._file.write(line + '\n')
        except OSError as e:
            raise EncodingError(self.path, e) from e

        self.written += 1

    def commit(self) -> Path:
        """
        Close the partial file and move it to its final path.

        Raises:
            EncodingError: If closing or renaming fails.
        """

        try:
            self._close()
            os.replace(self.partial, self.path)
        except OSError as e:
            self.discard()
            raise EncodingError(self.path, e) from e

        _log.info(
            '[interactions] Wrote %d interactions to %s.',
            self.written,
            self.path,
        )

        return self.path

    def discard(self) -> None:
        """Close and delete the partial file."""

        try:
            self._close()
        except OSError as e:
            _log.warning('[interactions] Closing %s failed: %s', self.partial, e)

        try:
            self.partial.unlink(missing_ok=True)
        except OSError as e:
            _log.warning('[interactions] Removing %s failed: %s', self.partial, e)

    def _close(self) -> None:

        if self._file is not None:
            f, self._file = self._file, None
            f.close()
