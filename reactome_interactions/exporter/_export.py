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

"""Fan one interaction stream out to several writers."""

from __future__ import annotations

__all__ = ['export']

import logging
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from ._errors import EncodingError, ExportError

if TYPE_CHECKING:
    from ._record import Interaction
    from .writers import InteractionWriter

_log = logging.getLogger(__name__)


def export(
    interactions: Iterable[Interaction],
    writers: Sequence[InteractionWriter],
) -> int:
    """
    Write every interaction of a single pass to all *writers*.

    A writer failing with :class:`EncodingError` is discarded and the
    remaining writers continue.  Any other exception, including one
    raised by the stream itself, discards all outputs and propagates.

    Args:
        interactions:
            Interactions, iterated exactly once.
        writers:
            Writers, not yet opened.

    Returns:
        Number of interactions consumed from the stream.

    Raises:
        ExportError: After committing the successful outputs, if any
            writer failed.
    """

    active: list[InteractionWriter] = []
    failures: list[EncodingError] = []
    n = 0

    def _fail(writer: InteractionWriter, error: EncodingError) -> None:

        _log.error('[interactions] %s', error)
        writer.discard()
        active.remove(writer)
        failures.append(error)

    try:
        for writer in writers:
            try:
                active.append(writer.open())
            except EncodingError as e:
                failures.append(e)
                _log.error('[interactions] %s', e)

        for interaction in interactions:

            if not active:
                break

            n += 1

            for writer in list(active):
                try:
                    writer.write(interaction)
                except EncodingError as e:
                    _fail(writer, e)

    except BaseException:
        for writer in active:
            writer.discard()
        raise

    for writer in list(active):
        try:
            writer.commit()
        except EncodingError as e:
            _log.error('[interactions] %s', e)
            active.remove(writer)
            failures.append(e)

    if failures:
        raise ExportError(failures)

    return n
