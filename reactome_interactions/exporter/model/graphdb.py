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
Entity model backed by the Reactome graph database.

Queries a Neo4j instance loaded with the Reactome graph schema through
the official ``neo4j`` driver.  Physical entities carry ``stId``,
``displayName`` and ``schemaClass`` properties; container relationships
(``hasComponent``, ``hasMember``, ``repeatedUnit``, ``input``) carry
``stoichiometry`` and ``order``.  Entities and catalyst activities are
cached per model instance, so one instance should serve one export run.
"""

from __future__ import annotations

__all__ = ['Neo4jEntityModel', 'bolt_uri']

import logging
from typing import TYPE_CHECKING

from .._errors import (
    ConnectionLostError,
    EntityModelError,
    UnknownObjectError,
    UnknownSpeciesError,
)
from .._record import RELATIONS, CatalystActivity, Child, Entity, kind_of

if TYPE_CHECKING:
    from collections.abc import Iterator

_log = logging.getLogger(__name__)

_PROJECTION = '''
    OPTIONAL MATCH (e)-[:referenceEntity]->(re:ReferenceEntity)
    OPTIONAL MATCH (e)-[:compartment]->(c:Compartment)
    OPTIONAL MATCH (e)-[:species]->(s:Species)
    WITH {extra}e, re,
         collect(DISTINCT c.displayName) AS compartments,
         head(collect(DISTINCT s)) AS s
    RETURN e.stId AS st_id,
           e.displayName AS name,
           e.schemaClass AS schema_class,
           compartments,
           re.databaseName AS database,
           re.identifier AS identifier,
           re.geneName AS gene_names,
           s.displayName AS species,
           s.taxId AS taxon_id{returns}
'''

_ENTITY = '''
    MATCH (e:DatabaseObject {stId: $st_id})
''' + _PROJECTION.format(extra='', returns='')

_CHILDREN = '''
    MATCH (p:DatabaseObject {{stId: $st_id}})-[r:{relation}]->(e:PhysicalEntity)
''' + _PROJECTION.format(
    extra='r, ',
    returns=',\n           r.stoichiometry AS stoichiometry, r.order AS order',
) + '''
    ORDER BY order
'''

_CATALYSTS = '''
    MATCH (rle:ReactionLikeEvent {stId: $st_id})-[r:catalystActivity]->(ca:CatalystActivity)
    MATCH (ca)-[:physicalEntity]->(pe:PhysicalEntity)
    OPTIONAL MATCH (ca)-[:activeUnit]->(au:PhysicalEntity)
    RETURN ca.dbId AS activity_id,
           pe.stId AS catalyst,
           collect(DISTINCT au.stId) AS active_units,
           r.order AS order
    ORDER BY order
'''

_SPECIES = '''
    MATCH (s:Species)
    RETURN s.displayName AS name
    ORDER BY name
'''

_SPECIES_NAME = '''
    MATCH (s:Species)
    WHERE toLower(s.displayName) = toLower($name)
       OR $name IN s.name
       OR toString(s.taxId) = $name
    RETURN s.displayName AS name
    LIMIT 1
'''

_CONTAINERS = '''
    MATCH (:Species {displayName: $species})<-[:species]-(e)
    WHERE e:Complex OR e:EntitySet OR e:Polymer OR e:ReactionLikeEvent
''' + _PROJECTION.format(extra='', returns='') + '''
    ORDER BY st_id
'''


def bolt_uri(host: str, port: int | str = 7687) -> str:
    """
    Connection URI for *host*.

    A host given without a scheme becomes ``bolt://<host>:<port>``;
    a full URI is returned unchanged.
    """

    if '://' in host:
        return host

    if ':' in host:
        return f'bolt://{host}'

    return f'bolt://{host}:{port}'


class Neo4jEntityModel:
    """
    Reactome graph database access.

    The driver is created on first use and closed by :meth:`close` or on
    leaving the ``with`` block.

    Args:
        host:
            Bolt URI or host name of the Neo4j server.
        user:
            Database user.
        password:
            Database password.
        port:
            Port used when *host* has none.
        database:
            Neo4j database name; ``None`` uses the server default.
    """

    def __init__(
        self,
        host: str,
        user: str,
        password: str,
        port: int | str = 7687,
        database: str | None = None,
    ):

        self.uri = bolt_uri(host, port)
        self.user = user
        self.database = database
        self._password = password
        self._driver = None
        self._entities: dict[str, Entity] = {}
        self._activities: dict[str, list[CatalystActivity]] = {}

    def __enter__(self):

        return self

    def __exit__(self, *exc):

        self.close()

    def close(self) -> None:

        if self._driver is not None:
            self._driver.close()
            self._driver = None

    def _connect(self):

        if self._driver is None:

            from neo4j import GraphDatabase

            _log.info('[interactions] Connecting to %s as %s.', self.uri, self.user)
            self._driver = GraphDatabase.driver(
                self.uri,
                auth=(self.user, self._password),
            )

        return self._driver

    def _run(self, query: str, **params) -> list[dict]:
        """Run one read query and return its records as dicts."""

        from neo4j.exceptions import (
            AuthError,
            DriverError,
            Neo4jError,
            ServiceUnavailable,
            SessionExpired,
        )

        try:
            with self._connect().session(database=self.database) as session:
                return [record.data() for record in session.run(query, params)]

        except (ServiceUnavailable, SessionExpired, AuthError) as e:
            raise ConnectionLostError(
                f'Graph database at {self.uri} unavailable: {e}'
            ) from e

        except (DriverError, Neo4jError) as e:
            raise EntityModelError(f'Graph database query failed: {e}') from e

    def _entity(self, row: dict) -> Entity:

        st_id = row['st_id']

        if st_id not in self._entities:

            self._entities[st_id] = Entity(
                st_id=st_id,
                kind=kind_of(row.get('schema_class')),
                name=row.get('name') or st_id,
                schema_class=row.get('schema_class') or '',
                compartments=tuple(row.get('compartments') or ()),
                database=row.get('database'),
                identifier=(
                    str(row['identifier'])
                    if row.get('identifier') is not None else
                    None
                ),
                gene_names=tuple(row.get('gene_names') or ()),
                species=row.get('species'),
                taxon_id=(
                    str(row['taxon_id'])
                    if row.get('taxon_id') is not None else
                    None
                ),
            )

        return self._entities[st_id]

    def entity(self, st_id: str) -> Entity:

        if st_id not in self._entities:

            rows = self._run(_ENTITY, st_id=st_id)

            if not rows:
                raise UnknownObjectError(st_id)

            self._entity(rows[0])

        return self._entities[st_id]

    def children(self, entity: Entity, relation: str) -> list[Child]:

        if relation not in RELATIONS.values():
            raise ValueError(f'Unknown relation: {relation!r}')

        rows = self._run(
            _CHILDREN.format(relation=relation),
            st_id=entity.st_id,
        )

        return [
            Child(self._entity(row), int(row.get('stoichiometry') or 1))
            for row in rows
        ]

    def catalyst_activities(self, reaction: Entity) -> list[CatalystActivity]:

        if reaction.st_id not in self._activities:

            self._activities[reaction.st_id] = [
                CatalystActivity(
                    st_id=str(row['activity_id']),
                    physical_entity=self.entity(row['catalyst']),
                    active_units=tuple(
                        self.entity(unit)
                        for unit in row.get('active_units') or ()
                    ),
                )
                for row in self._run(_CATALYSTS, st_id=reaction.st_id)
            ]

        return self._activities[reaction.st_id]

    def species(self) -> list[str]:

        return [row['name'] for row in self._run(_SPECIES)]

    def species_name(self, name: str) -> str:

        rows = self._run(_SPECIES_NAME, name=name.strip())

        if not rows:
            raise UnknownSpeciesError(name)

        return rows[0]['name']

    def containers(self, species: str) -> Iterator[Entity]:

        for row in self._run(_CONTAINERS, species=species):
            yield self._entity(row)
