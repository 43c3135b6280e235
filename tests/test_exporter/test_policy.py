#!/usr/bin/env python

"""Tests for reactome_interactions.exporter._policy module."""

import pytest

from reactome_interactions.exporter._errors import ConfigError
from reactome_interactions.exporter._policy import (
    SimpleEntityPolicy,
    TrivialChemicals,
    admits,
    filter_group,
    within_cap,
)
from reactome_interactions.exporter._record import Entity, EntityKind

WATER = Entity(
    'R-ALL-29356',
    kind=EntityKind.SIMPLE_ENTITY,
    database='ChEBI',
    identifier='15377',
)
GLUCOSE = Entity(
    'R-ALL-17925',
    kind=EntityKind.SIMPLE_ENTITY,
    database='ChEBI',
    identifier='17234',
)
PROTEIN = Entity(
    'R-HSA-101',
    kind=EntityKind.EWAS,
    database='UniProt',
    identifier='P00001',
)


class TestSimpleEntityPolicy:

    @pytest.mark.parametrize('value', ['ALL', 'all', ' All '])
    def test_parse_case_insensitive(self, value):
        assert SimpleEntityPolicy.parse(value) is SimpleEntityPolicy.ALL

    def test_parse_non_trivial(self):
        assert (
            SimpleEntityPolicy.parse('non_trivial') is
            SimpleEntityPolicy.NON_TRIVIAL
        )

    def test_parse_instance(self):
        assert (
            SimpleEntityPolicy.parse(SimpleEntityPolicy.NONE) is
            SimpleEntityPolicy.NONE
        )

    def test_parse_unknown(self):
        with pytest.raises(ConfigError, match='Unknown simple entities policy'):
            SimpleEntityPolicy.parse('SOME')

    def test_parse_missing(self):
        with pytest.raises(ConfigError):
            SimpleEntityPolicy.parse(None)


class TestTrivialChemicals:

    def test_builtin(self):
        trivial = TrivialChemicals()

        assert len(trivial) > 10
        assert trivial(WATER)
        assert not trivial(GLUCOSE)

    def test_not_chebi(self):
        assert not TrivialChemicals()(PROTEIN)

    def test_custom_identifiers(self):
        """Bare and prefixed ChEBI IDs are both accepted."""

        trivial = TrivialChemicals(['17234', 'CHEBI:30616'])

        assert trivial(GLUCOSE)
        assert not trivial(WATER)
        assert 'CHEBI:30616' in trivial.identifiers

    def test_from_yaml(self, tmp_path):
        path = tmp_path / 'trivial.yaml'
        path.write_text('trivial:\n  - CHEBI:17234\n')

        trivial = TrivialChemicals.from_yaml(path)

        assert trivial(GLUCOSE)
        assert len(trivial) == 1

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match='absent.yaml'):
            TrivialChemicals.from_yaml(tmp_path / 'absent.yaml')

    @pytest.mark.parametrize(
        'content',
        ['trivial: [\n', 'trivial: water\n', '- CHEBI:15377\n'],
        ids=['malformed', 'not_a_list', 'no_mapping'],
    )
    def test_invalid_file(self, tmp_path, content):
        path = tmp_path / 'trivial.yaml'
        path.write_text(content)

        with pytest.raises(ConfigError):
            TrivialChemicals.from_yaml(path)

    def test_lowercase_prefix(self):
        water = Entity(
            'R-ALL-29356',
            kind=EntityKind.SIMPLE_ENTITY,
            database='ChEBI',
            identifier='chebi:15377',
        )

        assert TrivialChemicals()(water)


# ---------------------------------------------------------------------------
# Filtering and size cap
# ---------------------------------------------------------------------------

class TestAdmits:

    @staticmethod
    def _trivial(entity):

        return entity.st_id == WATER.st_id

    @pytest.mark.parametrize('policy', list(SimpleEntityPolicy))
    def test_non_simple_always_admitted(self, policy):
        assert admits(PROTEIN, policy, self._trivial)

    def test_all(self):
        assert admits(WATER, SimpleEntityPolicy.ALL, self._trivial)

    def test_none(self):
        assert not admits(GLUCOSE, SimpleEntityPolicy.NONE, self._trivial)

    def test_non_trivial(self):
        assert not admits(WATER, SimpleEntityPolicy.NON_TRIVIAL, self._trivial)
        assert admits(GLUCOSE, SimpleEntityPolicy.NON_TRIVIAL, self._trivial)

    def test_filter_group_keeps_stoichiometry(self):
        group = {WATER: 2, GLUCOSE: 1, PROTEIN: 3}

        result = filter_group(group, SimpleEntityPolicy.NON_TRIVIAL, self._trivial)

        assert result == {GLUCOSE: 1, PROTEIN: 3}


class TestWithinCap:

    @pytest.mark.parametrize('size, expected', [
        (0, False),
        (1, False),
        (2, True),
        (4, True),
        (5, False),
    ])
    def test_pairs(self, size, expected):
        assert within_cap(size, 4) is expected

    def test_cross_role_minimum(self):
        assert within_cap(1, 4, minimum=1)
        assert not within_cap(0, 4, minimum=1)
