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

"""One record per unordered entity pair per export run."""

from __future__ import annotations

__all__ = ['Deduplicator']

import threading
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ._record import Interaction


class Deduplicator:
    """
    Drops interactions whose pair has already been seen.

    The first interaction of a pair wins, together with its provenance;
    later ones are discarded and counted in :attr:`duplicates`.  Safe to
    share between threads.
    """

    def __init__(self):

        self._seen: set[tuple[str, str]] = set()
        self._lock = threading.Lock()
        self.duplicates = 0

    def admit(self, interaction: Interaction) -> bool:
        """Record the pair of *interaction*; ``False`` if seen before."""

        key = interaction.key

        with self._lock:

            if key in self._seen:
                self.duplicates += 1
                return False

            self._seen.add(key)
            return True

    def __call__(self, interactions: Iterable[Interaction]) -> Iterator[Interaction]:

        for interaction in interactions:
            if self.admit(interaction):
                yield interaction

    def __len__(self) -> int:

        return len(self._seen)

    def clear(self) -> None:

        with self._lock:
            self._seen.clear()
