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
Participant extraction.

Unfolds one container into its direct participants, grouped by the role
under which they are attached:

=================  ==============  ======================================
Container          Role            Children
=================  ==============  ======================================
Complex            component       ``hasComponent``
EntitySet          member          ``hasMember``
Polymer            repeatedUnit    ``repeatedUnit``
ReactionLikeEvent  input           ``input``
ReactionLikeEvent  catalyst        ``catalystActivity[].physicalEntity``
CatalystActivity   activeUnit      ``activeUnit``
=================  ==============  ======================================

Nested containers are not unfolded here; they appear as single
participants and are expanded separately by the inference engine.
"""

from __future__ import annotations

__all__ = ['participants', 'ParticipantGroup']

from collections.abc import Iterable
from typing import TYPE_CHECKING

from ._record import (
    ACTIVE_UNIT,
    CATALYST,
    CONTAINER_ROLES,
    RELATIONS,
    CatalystActivity,
    Entity,
)

if TYPE_CHECKING:
    from .model import EntityModel


ParticipantGroup = dict[str, dict[Entity, int]]
"""Role label → entity → stoichiometry within that role."""


def _accumulate(
    groups: ParticipantGroup,
    role: str,
    occurrences: Iterable[tuple[Entity, int]],
) -> None:
    """Add occurrences under *role*; the role is only created if non-empty."""

    for entity, n in occurrences:
        group = groups.setdefault(role, {})
        group[entity] = group.get(entity, 0) + max(int(n), 1)


def participants(
    obj: Entity | CatalystActivity,
    model: EntityModel,
) -> ParticipantGroup:
    """
    Role-tagged direct participants of one container.

    Args:
        obj:
            A complex, entity set, polymer or reaction-like event, or a
            catalyst activity of a reaction.
        model:
            Entity model resolving the relationships.

    Returns:
        Dict mapping role labels to dicts of entity → stoichiometry.
        Roles without participants are absent.  Entities that are not
        containers yield an empty dict.

    Raises:
        EntityModelError: If the model fails to resolve a relationship.
    """

    groups: ParticipantGroup = {}

    if isinstance(obj, CatalystActivity):
        _accumulate(groups, ACTIVE_UNIT, ((unit, 1) for unit in obj.active_units))
        return groups

    for role in CONTAINER_ROLES.get(obj.kind, ()):

        if role == CATALYST:
            occurrences = (
                (activity.physical_entity, 1)
                for activity in model.catalyst_activities(obj)
            )
        else:
            occurrences = model.children(obj, RELATIONS[role])

        _accumulate(groups, role, occurrences)

    return groups
