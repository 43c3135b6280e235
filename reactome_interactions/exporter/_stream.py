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
Streams of unique interactions.

Roots are resolved up front, so unknown objects or species fail before
any traversal starts.  The interactions themselves are produced lazily
while the stream is consumed, and can be consumed only once: each
consumer of an export run must be fed from the same iteration (see
:func:`~reactome_interactions.exporter._export.export`).

Usage::

    from reactome_interactions.exporter import MemoryEntityModel, collect

    model = MemoryEntityModel.from_yaml('model.yaml')
    df = collect(model, objects=['R-HSA-1'], max_unit_size=6)
"""

from __future__ import annotations

__all__ = [
    'InteractionStream',
    'collect',
    'resolve_roots',
    'species_names',
    'stream',
]

import logging
from collections.abc import Iterable, Iterator
from concurrent.futures import FIRST_COMPLETED, ThreadPoolExecutor, wait
from itertools import chain
from typing import TYPE_CHECKING

import pandas as pd
from tqdm import tqdm

from ._config import settings as _settings
from ._dedup import Deduplicator
from ._infer import InteractionInference
from ._policy import TrivialChemicals
from ._record import Interaction

if TYPE_CHECKING:
    from pathlib import Path

    from ._config import ExportSettings
    from ._record import Entity
    from .model import EntityModel

_log = logging.getLogger(__name__)

ALL_SPECIES = 'ALL'


def species_names(model: EntityModel, species: Iterable[str]) -> list[str]:
    """
    Resolve species arguments into unique display names.

    ``'ALL'`` (any case) stands for every species of the model.
    Duplicates collapse; first-seen order is kept.

    Raises:
        UnknownSpeciesError: For the first name the model does not know.
    """

    species = list(species)

    if any(s.strip().upper() == ALL_SPECIES for s in species):
        names = model.species()
    else:
        names = [model.species_name(s) for s in species]

    return list(dict.fromkeys(names))


def resolve_roots(
    model: EntityModel,
    objects: Iterable[str] = (),
    species: Iterable[str] = (),
) -> Iterable[Entity]:
    """
    Roots of an export run.

    If any object identifier is given, the roots are exactly those
    objects and *species* is ignored.  Otherwise the roots are all
    containers of the resolved species, listed lazily.

    Raises:
        UnknownObjectError: For an unknown object identifier.
        UnknownSpeciesError: For an unknown species name.
    """

    objects = list(dict.fromkeys(objects))

    if objects:
        return [model.entity(st_id) for st_id in objects]

    names = species_names(model, species)
    _log.info('[interactions] Species: %s.', ', '.join(names))

    return chain.from_iterable(model.containers(name) for name in names)


class InteractionStream:
    """
    Lazy, single-pass stream of unique interactions.

    Iterating the stream expands every root through the inference
    engine and passes candidates through a :class:`Deduplicator`, so
    each unordered pair is delivered once.  A second iteration raises
    ``RuntimeError``; build a new stream to enumerate again.  Stopping
    early (``break``, or closing the iterator) abandons the remaining
    traversal.

    With ``workers > 1`` roots are expanded in a thread pool, a bounded
    number at a time; deduplication stays in the consuming thread.

    Args:
        engine:
            Inference engine, bound to the entity model.
        roots:
            Containers to expand.
        workers:
            Number of roots expanded concurrently.
        progress:
            Show a progress bar over the roots.
    """

    def __init__(
        self,
        engine: InteractionInference,
        roots: Iterable[Entity],
        workers: int = 1,
        progress: bool = False,
    ):

        self.engine = engine
        self.workers = max(int(workers), 1)
        self.progress = progress
        self.emitted = 0
        self.duplicates = 0
        self._roots = roots
        self._consumed = False

    @classmethod
    def from_settings(
        cls,
        model: EntityModel,
        settings: ExportSettings,
    ) -> InteractionStream:
        """Resolve the roots of *settings* and build the stream."""

        is_trivial = (
            TrivialChemicals.from_yaml(settings.trivial_chemicals)
            if settings.trivial_chemicals else
            None
        )
        engine = InteractionInference(
            model,
            policy=settings.policy,
            max_unit_size=settings.max_unit_size,
            is_trivial=is_trivial,
        )
        roots = resolve_roots(model, settings.objects, settings.species)

        return cls(
            engine,
            roots,
            workers=settings.workers,
            progress=settings.progress,
        )

    def __iter__(self) -> Iterator[Interaction]:

        if self._consumed:
            raise RuntimeError(
                'InteractionStream can be iterated only once; '
                'create a new stream to enumerate again.'
            )

        self._consumed = True

        return self._generate()

    def _generate(self) -> Iterator[Interaction]:

        dedup = Deduplicator()

        try:
            for interaction in dedup(self._candidates()):
                self.emitted += 1
                yield interaction

        finally:
            self.duplicates = dedup.duplicates
            dedup.clear()
            stats = self.engine.stats
            _log.info(
                '[interactions] %d interactions from %d containers '
                '(%d duplicates dropped, %d oversized groups skipped, '
                '%d containers unresolved, %d cycles cut).',
                self.emitted,
                stats['containers'],
                self.duplicates,
                stats['oversized'],
                stats['failed'],
                stats['cycles'],
            )

    def _candidates(self) -> Iterator[Interaction]:

        total = len(self._roots) if hasattr(self._roots, '__len__') else None
        roots = tqdm(
            self._roots,
            desc='[interactions] roots',
            unit='root',
            total=total,
            disable=not self.progress,
        )

        try:
            if self.workers > 1:
                yield from self._concurrent(roots)
            else:
                expanded: set[str] = set()

                for root in roots:
                    yield from self.engine.interactions(root, expanded)

        finally:
            roots.close()

    def _expand_root(self, root: Entity) -> list[Interaction]:

        return list(self.engine.interactions(root))

    def _concurrent(self, roots: Iterable[Entity]) -> Iterator[Interaction]:

        limit = self.workers * 2
        pending: set = set()

        with ThreadPoolExecutor(max_workers=self.workers) as executor:

            try:
                for root in roots:

                    pending.add(executor.submit(self._expand_root, root))

                    if len(pending) >= limit:
                        done, pending = wait(pending, return_when=FIRST_COMPLETED)

                        for future in done:
                            yield from future.result()

                while pending:
                    done, pending = wait(pending, return_when=FIRST_COMPLETED)

                    for future in done:
                        yield from future.result()

            finally:
                for future in pending:
                    future.cancel()


def stream(
    model: EntityModel,
    *args: dict | Path | str,
    **kwargs,
) -> InteractionStream:
    """
    Build an interaction stream from configuration.

    Args:
        model:
            Entity model to read from.
        *args:
            Configuration overrides as dicts or YAML file paths.
        **kwargs:
            Top-level config keys, e.g. ``objects=['R-HSA-1']``,
            ``max_unit_size=6``, ``simple_entities_policy='ALL'``.
    """

    return InteractionStream.from_settings(model, _settings(*args, **kwargs))


def collect(
    model: EntityModel,
    *args: dict | Path | str,
    **kwargs,
) -> pd.DataFrame:
    """
    Collect all unique interactions into a DataFrame.

    Accepts the same arguments as :func:`stream`.

    Returns:
        DataFrame with one row per interaction, columns
        :attr:`Interaction.ROW_FIELDS`.
    """

    return pd.DataFrame(
        (i.as_row() for i in stream(model, *args, **kwargs)),
        columns=list(Interaction.ROW_FIELDS),
    )
