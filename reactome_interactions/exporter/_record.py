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
Entity and interaction records.

Entities form a closed set of variants (:class:`EntityKind`).  Which
variants are containers, and under which roles they carry children, is
declared once in :data:`CONTAINER_ROLES`.
"""

from __future__ import annotations

__all__ = [
    'EntityKind',
    'Entity',
    'Child',
    'CatalystActivity',
    'Interaction',
    'CONTAINER_ROLES',
    'RELATIONS',
    'kind_of',
    'COMPONENT',
    'MEMBER',
    'REPEATED_UNIT',
    'INPUT',
    'CATALYST',
    'ACTIVE_UNIT',
]

import enum
from dataclasses import dataclass, field
from typing import NamedTuple


class EntityKind(enum.Enum):
    """Variant tag of an entity."""

    SIMPLE_ENTITY = 'SimpleEntity'
    EWAS = 'EntityWithAccessionedSequence'
    GENOME_ENCODED = 'GenomeEncodedEntity'
    COMPLEX = 'Complex'
    ENTITY_SET = 'EntitySet'
    POLYMER = 'Polymer'
    DRUG = 'Drug'
    OTHER = 'OtherEntity'
    REACTION = 'ReactionLikeEvent'


# Role labels
COMPONENT = 'component'
MEMBER = 'member'
REPEATED_UNIT = 'repeatedUnit'
INPUT = 'input'
CATALYST = 'catalyst'
ACTIVE_UNIT = 'activeUnit'

CONTAINER_ROLES: dict[EntityKind, tuple[str, ...]] = {
    EntityKind.COMPLEX: (COMPONENT,),
    EntityKind.ENTITY_SET: (MEMBER,),
    EntityKind.POLYMER: (REPEATED_UNIT,),
    EntityKind.REACTION: (INPUT, CATALYST),
}
"""Roles under which each container variant holds children."""

RELATIONS: dict[str, str] = {
    COMPONENT: 'hasComponent',
    MEMBER: 'hasMember',
    REPEATED_UNIT: 'repeatedUnit',
    INPUT: 'input',
}
"""Model relationship read for each role with plain entity children."""

_SCHEMA_CLASSES = {
    'SimpleEntity': EntityKind.SIMPLE_ENTITY,
    'EntityWithAccessionedSequence': EntityKind.EWAS,
    'GenomeEncodedEntity': EntityKind.GENOME_ENCODED,
    'Complex': EntityKind.COMPLEX,
    'EntitySet': EntityKind.ENTITY_SET,
    'DefinedSet': EntityKind.ENTITY_SET,
    'CandidateSet': EntityKind.ENTITY_SET,
    'OpenSet': EntityKind.ENTITY_SET,
    'Polymer': EntityKind.POLYMER,
    'Drug': EntityKind.DRUG,
    'ChemicalDrug': EntityKind.DRUG,
    'ProteinDrug': EntityKind.DRUG,
    'RNADrug': EntityKind.DRUG,
    'OtherEntity': EntityKind.OTHER,
    'ReactionLikeEvent': EntityKind.REACTION,
    'Reaction': EntityKind.REACTION,
    'BlackBoxEvent': EntityKind.REACTION,
    'Polymerisation': EntityKind.REACTION,
    'Depolymerisation': EntityKind.REACTION,
    'FailedReaction': EntityKind.REACTION,
}


def kind_of(schema_class: str | None) -> EntityKind:
    """
    Map a Reactome schema class name to its entity variant.

    Unknown classes (e.g. ``'Cell'``) are treated as opaque
    :attr:`EntityKind.OTHER` leaves.
    """

    return _SCHEMA_CLASSES.get(schema_class or '', EntityKind.OTHER)


@dataclass(frozen=True)
class Entity:
    """
    A biological object of the entity model.

    Equality and hashing use the stable identifier only; all other
    attributes are descriptive.
    """

    st_id: str
    """Stable identifier (e.g. ``'R-HSA-69488'``)."""

    kind: EntityKind = field(default=EntityKind.OTHER, compare=False)
    name: str = field(default='', compare=False)
    schema_class: str = field(default='', compare=False)
    compartments: tuple[str, ...] = field(default=(), compare=False)

    database: str | None = field(default=None, compare=False)
    """Reference database name (e.g. ``'UniProt'``, ``'ChEBI'``)."""

    identifier: str | None = field(default=None, compare=False)
    """Identifier within :attr:`database` (e.g. ``'P04637'``)."""

    gene_names: tuple[str, ...] = field(default=(), compare=False)
    species: str | None = field(default=None, compare=False)
    taxon_id: str | None = field(default=None, compare=False)

    @property
    def is_container(self) -> bool:

        return self.kind in CONTAINER_ROLES

    @property
    def chebi_id(self) -> str | None:
        """ChEBI identifier with the ``CHEBI:`` prefix, if any."""

        if not self.identifier or (self.database or '').lower() != 'chebi':
            return None

        ident = self.identifier.strip()

        if ident.upper().startswith('CHEBI:'):
            ident = ident[6:]

        return f'CHEBI:{ident}'


class Child(NamedTuple):
    """One occurrence of an entity under a container relationship."""

    entity: Entity
    stoichiometry: int = 1


class CatalystActivity(NamedTuple):
    """Catalysis of a reaction by one physical entity."""

    st_id: str
    physical_entity: Entity
    active_units: tuple[Entity, ...] = ()


class Interaction(NamedTuple):
    """
    A pair of entities inferred to interact.

    Use :meth:`between` to build instances: it places the two sides in
    canonical (stable identifier) order and rejects self pairs, so that
    ``{A, B}`` and ``{B, A}`` share one :attr:`key`.
    """

    a: Entity
    b: Entity
    interaction_type: str
    """Why the pair interacts, e.g. ``'co-complex'``, ``'catalyst-substrate'``."""

    role_a: str
    role_b: str
    stoichiometry_a: int
    stoichiometry_b: int
    context_id: str
    """Stable identifier of the container the pair was inferred from."""

    context_name: str = ''
    context_class: str = ''

    ROW_FIELDS = (
        'id_a', 'id_b', 'name_a', 'name_b', 'kind_a', 'kind_b',
        'database_a', 'database_b', 'identifier_a', 'identifier_b',
        'role_a', 'role_b', 'stoichiometry_a', 'stoichiometry_b',
        'interaction_type', 'context_id', 'context_name', 'context_class',
    )

    @classmethod
    def between(
        cls,
        x: Entity,
        y: Entity,
        interaction_type: str,
        context: Entity,
        role_x: str,
        role_y: str,
        stoichiometry_x: int = 1,
        stoichiometry_y: int = 1,
    ) -> Interaction:

        if x == y:
            raise ValueError(f'Self interaction of {x.st_id}')

        if y.st_id < x.st_id:
            x, y = y, x
            role_x, role_y = role_y, role_x
            stoichiometry_x, stoichiometry_y = stoichiometry_y, stoichiometry_x

        return cls(
            a=x,
            b=y,
            interaction_type=interaction_type,
            role_a=role_x,
            role_b=role_y,
            stoichiometry_a=stoichiometry_x,
            stoichiometry_b=stoichiometry_y,
            context_id=context.st_id,
            context_name=context.name,
            context_class=context.schema_class or context.kind.value,
        )

    @property
    def key(self) -> tuple[str, str]:

        return self.a.st_id, self.b.st_id

    def as_row(self) -> dict:
        """Flatten into a dict keyed by :attr:`ROW_FIELDS`."""

        return {
            'id_a': self.a.st_id,
            'id_b': self.b.st_id,
            'name_a': self.a.name,
            'name_b': self.b.name,
            'kind_a': self.a.kind.value,
            'kind_b': self.b.kind.value,
            'database_a': self.a.database,
            'database_b': self.b.database,
            'identifier_a': self.a.identifier,
            'identifier_b': self.b.identifier,
            'role_a': self.role_a,
            'role_b': self.role_b,
            'stoichiometry_a': self.stoichiometry_a,
            'stoichiometry_b': self.stoichiometry_b,
            'interaction_type': self.interaction_type,
            'context_id': self.context_id,
            'context_name': self.context_name,
            'context_class': self.context_class,
        }
