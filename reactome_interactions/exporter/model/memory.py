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
Entity model held in memory.

Built from a plain dict, usually loaded from YAML.  Useful for offline
exports of small curated models and for tests.  Document layout::

    species:
      - name: Homo sapiens
        taxon_id: '9606'
        aliases: [human]

    entities:
      R-HSA-1:
        name: ABC complex
        schema_class: Complex
        species: Homo sapiens
        compartments: [cytosol]
        hasComponent: [R-HSA-2, R-HSA-3, {id: R-HSA-4, stoichiometry: 2}]
      R-HSA-2:
        name: A
        schema_class: EntityWithAccessionedSequence
        reference: {database: UniProt, identifier: P00001, gene_names: [A]}
      R-HSA-10:
        name: A binds B
        schema_class: Reaction
        input: [R-HSA-2, R-HSA-3]
        catalystActivity:
          - {id: '100', physicalEntity: R-HSA-1, activeUnit: [R-HSA-4]}

Children listed more than once count once per listing.  References to
identifiers absent from ``entities`` raise
:class:`~reactome_interactions.exporter._errors.EntityModelError` when
the parent is expanded.
"""

from __future__ import annotations

__all__ = ['MemoryEntityModel']

from typing import TYPE_CHECKING

import yaml

from .._errors import EntityModelError, UnknownObjectError, UnknownSpeciesError
from .._record import CatalystActivity, Child, Entity, kind_of

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


class MemoryEntityModel:
    """
    Entity model backed by a nested dict.

    Args:
        data:
            Dict with ``species`` and ``entities`` sections as described
            in the module docstring.
    """

    def __init__(self, data: dict):

        self._data = data.get('entities') or {}
        self._species = [
            s if isinstance(s, dict) else {'name': s}
            for s in data.get('species') or []
        ]
        self._entities: dict[str, Entity] = {}

    @classmethod
    def from_yaml(cls, path: Path | str) -> MemoryEntityModel:

        with open(path) as f:
            return cls(yaml.safe_load(f) or {})

    def __enter__(self):

        return self

    def __exit__(self, *exc):

        return None

    def entity(self, st_id: str) -> Entity:

        if st_id not in self._entities:

            if st_id not in self._data:
                raise UnknownObjectError(st_id)

            self._entities[st_id] = self._build(st_id, self._data[st_id] or {})

        return self._entities[st_id]

    def _build(self, st_id: str, record: dict) -> Entity:

        reference = record.get('reference') or {}
        species = record.get('species')

        return Entity(
            st_id=st_id,
            kind=kind_of(record.get('schema_class')),
            name=record.get('name', st_id),
            schema_class=record.get('schema_class', ''),
            compartments=tuple(record.get('compartments', ())),
            database=reference.get('database'),
            identifier=(
                str(reference['identifier'])
                if reference.get('identifier') is not None else
                None
            ),
            gene_names=tuple(reference.get('gene_names', ())),
            species=species,
            taxon_id=self._taxon_id(species),
        )

    def _taxon_id(self, species: str | None) -> str | None:

        for s in self._species:
            if s.get('name') == species and s.get('taxon_id') is not None:
                return str(s['taxon_id'])

        return None

    def _resolve(self, st_id: str, parent: Entity) -> Entity:

        try:
            return self.entity(st_id)
        except UnknownObjectError:
            raise EntityModelError(
                f'{parent.st_id} refers to missing entity {st_id}'
            ) from None

    def children(self, entity: Entity, relation: str) -> list[Child]:

        result = []

        for item in self._record(entity).get(relation) or []:

            if isinstance(item, dict):
                st_id = item['id']
                stoichiometry = int(item.get('stoichiometry', 1))
            else:
                st_id = item
                stoichiometry = 1

            result.append(Child(self._resolve(st_id, entity), stoichiometry))

        return result

    def catalyst_activities(self, reaction: Entity) -> list[CatalystActivity]:

        result = []

        for i, item in enumerate(self._record(reaction).get('catalystActivity') or []):

            result.append(CatalystActivity(
                st_id=str(item.get('id', f'{reaction.st_id}.{i}')),
                physical_entity=self._resolve(item['physicalEntity'], reaction),
                active_units=tuple(
                    self._resolve(unit, reaction)
                    for unit in item.get('activeUnit') or []
                ),
            ))

        return result

    def _record(self, entity: Entity) -> dict:

        try:
            return self._data[entity.st_id] or {}
        except KeyError:
            raise EntityModelError(f'No record for {entity.st_id}') from None

    def species(self) -> list[str]:

        return [s['name'] for s in self._species]

    def species_name(self, name: str) -> str:

        wanted = name.strip().lower()

        for s in self._species:

            names = [s['name'], *s.get('aliases', ())]

            if s.get('taxon_id') is not None:
                names.append(str(s['taxon_id']))

            if wanted in (n.lower() for n in names):
                return s['name']

        raise UnknownSpeciesError(name)

    def containers(self, species: str) -> Iterator[Entity]:

        for st_id in sorted(self._data):

            record = self._data[st_id] or {}

            if record.get('species') != species:
                continue

            entity = self.entity(st_id)

            if entity.is_container:
                yield entity
