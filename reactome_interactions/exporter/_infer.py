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
Interaction inference.

Turns the participants of a container into candidate interaction pairs:

- Components of a complex, members of a set, repeated units of a polymer
  and inputs of a reaction interact pairwise within their group
  (``co-complex``, ``co-member``, ``co-polymer``, ``co-input``).
- Each catalyst of a reaction interacts with each input
  (``catalyst-substrate``).  When a catalyst activity names active
  units, those replace the whole catalyst (``active-unit-substrate``).

Every container is handled on its own; nested containers are expanded
recursively, depth-first, and contribute their own pairs.  Pair order
is not meaningful.
"""

from __future__ import annotations

__all__ = [
    'InteractionInference',
    'INTERACTION_TYPES',
    'CATALYST_SUBSTRATE',
    'ACTIVE_UNIT_SUBSTRATE',
]

import itertools
import logging
import threading
from collections import Counter
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING

from ._errors import ConnectionLostError, EntityModelError
from ._participants import ParticipantGroup, participants
from ._policy import SimpleEntityPolicy, TrivialChemicals, filter_group, within_cap
from ._record import (
    ACTIVE_UNIT,
    CATALYST,
    COMPONENT,
    INPUT,
    MEMBER,
    REPEATED_UNIT,
    EntityKind,
    Interaction,
)

if TYPE_CHECKING:
    from ._record import Entity
    from .model import EntityModel

_log = logging.getLogger(__name__)

INTERACTION_TYPES = {
    COMPONENT: 'co-complex',
    MEMBER: 'co-member',
    REPEATED_UNIT: 'co-polymer',
    INPUT: 'co-input',
}
"""Interaction type of pairs formed within one role group."""

CATALYST_SUBSTRATE = 'catalyst-substrate'
ACTIVE_UNIT_SUBSTRATE = 'active-unit-substrate'


class InteractionInference:
    """
    Infers interaction pairs from containers of an entity model.

    Counters of the work done are kept in :attr:`stats`:
    ``containers`` (expanded), ``oversized`` (role groups skipped by the
    size cap), ``failed`` (containers the model could not resolve) and
    ``cycles`` (containment cycles cut).

    Args:
        model:
            Entity model resolving container relationships.
        policy:
            Which simple entities take part in pairs.
        max_unit_size:
            Largest admitted role group that is expanded into pairs.
        is_trivial:
            Predicate classifying trivial small molecules for the
            ``NON_TRIVIAL`` policy.  Defaults to the built-in
            :class:`TrivialChemicals` list.
    """

    def __init__(
        self,
        model: EntityModel,
        policy: SimpleEntityPolicy | str = SimpleEntityPolicy.NON_TRIVIAL,
        max_unit_size: int = 4,
        is_trivial: Callable[[Entity], bool] | None = None,
    ):

        self.model = model
        self.policy = SimpleEntityPolicy.parse(policy)
        self.max_unit_size = max_unit_size
        self.is_trivial = TrivialChemicals() if is_trivial is None else is_trivial
        self.stats: Counter = Counter()
        self._lock = threading.Lock()

    def _count(self, key: str) -> None:

        with self._lock:
            self.stats[key] += 1

    def _admitted(
        self,
        container: Entity,
        role: str,
        group: dict[Entity, int],
    ) -> dict[Entity, int]:
        """Filter a role group; an oversized group is dropped as a whole."""

        admitted = filter_group(group, self.policy, self.is_trivial)

        if len(admitted) > self.max_unit_size:
            _log.debug(
                '[interactions] Skipping %s group of %s: '
                '%d participants exceed max_unit_size=%d.',
                role,
                container.st_id,
                len(admitted),
                self.max_unit_size,
            )
            self._count('oversized')
            return {}

        return admitted

    def container_interactions(self, container: Entity) -> list[Interaction]:
        """
        Pairs inferred from one container, without recursion.

        Raises:
            EntityModelError: If the model fails to resolve the container.
        """

        return list(self._pairs(container, participants(container, self.model)))

    def _pairs(
        self,
        container: Entity,
        groups: ParticipantGroup,
    ) -> Iterator[Interaction]:

        admitted = {
            role: self._admitted(container, role, group)
            for role, group in groups.items()
        }

        for role, interaction_type in INTERACTION_TYPES.items():

            group = admitted.get(role, {})

            if not within_cap(len(group), self.max_unit_size):
                continue

            for (x, nx), (y, ny) in itertools.combinations(group.items(), 2):
                yield Interaction.between(
                    x, y, interaction_type, container, role, role, nx, ny,
                )

        if container.kind is EntityKind.REACTION:
            yield from self._catalysis(container, admitted)

    def _catalysis(
        self,
        reaction: Entity,
        admitted: dict[str, dict[Entity, int]],
    ) -> Iterator[Interaction]:
        """Catalyst (or active unit) × input pairs of one reaction."""

        inputs = admitted.get(INPUT, {})
        catalysts = admitted.get(CATALYST, {})

        if not within_cap(len(inputs), self.max_unit_size, minimum=1):
            return

        for activity in self.model.catalyst_activities(reaction):

            units = participants(activity, self.model).get(ACTIVE_UNIT)

            if units:
                partners = self._admitted(reaction, ACTIVE_UNIT, units)
                role, interaction_type = ACTIVE_UNIT, ACTIVE_UNIT_SUBSTRATE
            else:
                catalyst = activity.physical_entity
                partners = (
                    {catalyst: catalysts[catalyst]}
                    if catalyst in catalysts else
                    {}
                )
                role, interaction_type = CATALYST, CATALYST_SUBSTRATE

            for (c, nc), (i, ni) in itertools.product(partners.items(), inputs.items()):

                if c == i:
                    continue

                yield Interaction.between(
                    c, i, interaction_type, reaction, role, INPUT, nc, ni,
                )

    def _nested(self, container: Entity, groups: ParticipantGroup) -> list[Entity]:
        """Child containers of *container*, regardless of filtering."""

        nested: dict[str, Entity] = {}

        for group in groups.values():
            for entity in group:
                if entity.is_container:
                    nested.setdefault(entity.st_id, entity)

        if container.kind is EntityKind.REACTION:
            for activity in self.model.catalyst_activities(container):
                for unit in activity.active_units:
                    if unit.is_container:
                        nested.setdefault(unit.st_id, unit)

        return [nested[st_id] for st_id in sorted(nested)]

    def interactions(
        self,
        root: Entity,
        expanded: set[str] | None = None,
    ) -> Iterator[Interaction]:
        """
        All pairs inferred under *root*, nested containers included.

        May yield the same pair more than once when it is implied by
        several containers; deduplication is up to the caller.

        Args:
            root:
                Container to start from.  Non-container roots yield
                nothing.
            expanded:
                Identifiers of containers already fully expanded in this
                run.  They are skipped and newly expanded containers are
                added.  Pass the same set across roots of one run to
                avoid repeating work.

        Raises:
            ConnectionLostError: If the model becomes unreachable.
                Other model failures only skip the affected container.
        """

        yield from self._expand(root, {}, set() if expanded is None else expanded)

    def _expand(
        self,
        container: Entity,
        path: dict[str, Entity],
        expanded: set[str],
    ) -> Iterator[Interaction]:

        if container.st_id in path:
            ids = list(path)
            cycle = ids[ids.index(container.st_id):] + [container.st_id]
            _log.debug(
                '[interactions] Containment cycle cut: %s.',
                ' -> '.join(cycle),
            )
            self._count('cycles')
            return

        if container.st_id in expanded or not container.is_container:
            return

        path[container.st_id] = container

        try:

            try:
                groups = participants(container, self.model)
                pairs = list(self._pairs(container, groups))
                nested = self._nested(container, groups)
            except ConnectionLostError:
                raise
            except EntityModelError as e:
                _log.warning('[interactions] Skipping %s: %s', container.st_id, e)
                self._count('failed')
                return

            self._count('containers')
            yield from pairs

            for child in nested:
                yield from self._expand(child, path, expanded)

            expanded.add(container.st_id)

        finally:
            del path[container.st_id]
