#!/usr/bin/env python

"""Tests for reactome_interactions.exporter._participants module."""

from reactome_interactions.exporter._participants import participants
from reactome_interactions.exporter._record import CatalystActivity, Entity


def _ids(group):

    return {e.st_id: n for e, n in group.items()}


class TestParticipants:
    """Role-tagged direct participants of containers."""

    def test_complex(self, model):
        groups = participants(model.entity('R-HSA-201'), model)

        assert set(groups) == {'component'}
        assert _ids(groups['component']) == {
            'R-HSA-101': 1,
            'R-HSA-102': 1,
            'R-HSA-103': 1,
        }

    def test_relationship_stoichiometry(self, model):
        groups = participants(model.entity('R-HSA-203'), model)

        assert _ids(groups['component']) == {'R-HSA-101': 2, 'R-HSA-102': 1}

    def test_repeated_occurrences_add_up(self, model):
        groups = participants(model.entity('R-HSA-204'), model)

        assert _ids(groups['component']) == {'R-HSA-101': 2}

    def test_set(self, model):
        groups = participants(model.entity('R-HSA-401'), model)

        assert set(groups) == {'member'}

    def test_polymer(self, model):
        groups = participants(model.entity('R-HSA-501'), model)

        assert _ids(groups['repeatedUnit']) == {'R-HSA-104': 1}

    def test_reaction(self, model):
        groups = participants(model.entity('R-HSA-301'), model)

        assert _ids(groups['input']) == {'R-HSA-102': 1, 'R-HSA-103': 1}
        assert _ids(groups['catalyst']) == {'R-HSA-104': 1}

    def test_nested_container_is_one_participant(self, model):
        """Catalyst complexes are not unfolded."""

        groups = participants(model.entity('R-HSA-302'), model)

        assert _ids(groups['catalyst']) == {'R-HSA-201': 1}

    def test_no_empty_roles(self, model):
        groups = participants(model.entity('R-HSA-303'), model)

        assert 'catalyst' not in groups
        assert all(groups.values())

    def test_leaf(self, model):
        assert participants(model.entity('R-HSA-101'), model) == {}

    def test_catalyst_activity(self, model):
        unit = model.entity('R-HSA-101')
        activity = CatalystActivity(
            '1',
            physical_entity=model.entity('R-HSA-201'),
            active_units=(unit,),
        )

        groups = participants(activity, model)

        assert groups == {'activeUnit': {unit: 1}}

    def test_activity_without_units(self, model):
        activity = CatalystActivity('1', physical_entity=Entity('R-HSA-104'))

        assert participants(activity, model) == {}

    def test_repeatable(self, model):
        container = model.entity('R-HSA-301')

        assert participants(container, model) == participants(container, model)
