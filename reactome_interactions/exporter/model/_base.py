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

"""Interface of the entity model consumed by the exporter."""

from __future__ import annotations

__all__ = ['EntityModel']

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .._record import CatalystActivity, Child, Entity


class EntityModel(Protocol):
    """
    Read-only access to typed entities and their relationships.

    One instance is passed explicitly to the inference engine and the
    interaction stream; nothing in the exporter looks it up globally.
    Failures to answer a query are raised as
    :class:`~reactome_interactions.exporter._errors.EntityModelError`;
    losing the backend altogether as its subclass
    :class:`~reactome_interactions.exporter._errors.ConnectionLostError`.
    """

    def entity(self, st_id: str) -> Entity:
        """
        Entity with stable identifier *st_id*.

        Raises:
            UnknownObjectError: If no such entity exists.
        """

    def children(self, entity: Entity, relation: str) -> list[Child]:
        """
        Direct children of *entity* under *relation*, one item per
        relationship occurrence (e.g. ``'hasComponent'``, ``'input'``).
        """

    def catalyst_activities(self, reaction: Entity) -> list[CatalystActivity]:
        """Catalyst activities of a reaction-like event."""

    def species(self) -> list[str]:
        """Display names of every known species."""

    def species_name(self, name: str) -> str:
        """
        Canonical display name of the species called *name*.

        Raises:
            UnknownSpeciesError: If no species matches.
        """

    def containers(self, species: str) -> Iterable[Entity]:
        """
        Every complex, entity set, polymer and reaction-like event of
        *species*, identified by its display name.
        """
