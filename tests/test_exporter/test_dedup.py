#!/usr/bin/env python

"""Tests for reactome_interactions.exporter._dedup module."""

from reactome_interactions.exporter._dedup import Deduplicator
from reactome_interactions.exporter._record import Entity, EntityKind, Interaction

A = Entity('R-HSA-1')
B = Entity('R-HSA-2')
C = Entity('R-HSA-3')
CTX1 = Entity('R-HSA-10', kind=EntityKind.COMPLEX)
CTX2 = Entity('R-HSA-20', kind=EntityKind.ENTITY_SET)


def _pair(x, y, ctx=CTX1, itype='co-complex'):

    return Interaction.between(x, y, itype, ctx, 'component', 'component')


class TestDeduplicator:

    def test_first_admitted(self):
        dedup = Deduplicator()

        assert dedup.admit(_pair(A, B))
        assert not dedup.admit(_pair(A, B))
        assert dedup.duplicates == 1

    def test_unordered(self):
        dedup = Deduplicator()

        assert dedup.admit(_pair(A, B))
        assert not dedup.admit(_pair(B, A, CTX2, 'co-member'))

    def test_first_provenance_wins(self):
        dedup = Deduplicator()
        items = [
            _pair(A, B, CTX1, 'co-complex'),
            _pair(B, A, CTX2, 'co-member'),
            _pair(A, C),
        ]

        result = list(dedup(items))

        assert [i.key for i in result] == [('R-HSA-1', 'R-HSA-2'), ('R-HSA-1', 'R-HSA-3')]
        assert result[0].interaction_type == 'co-complex'
        assert result[0].context_id == 'R-HSA-10'
        assert len(dedup) == 2

    def test_clear(self):
        dedup = Deduplicator()
        dedup.admit(_pair(A, B))
        dedup.clear()

        assert len(dedup) == 0
        assert dedup.admit(_pair(A, B))
