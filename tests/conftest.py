#!/usr/bin/env python

"""Shared test fixtures for reactome_interactions tests."""

import copy

import pytest
import yaml

from reactome_interactions.exporter.model import MemoryEntityModel


def _protein(name, uniprot, species='Homo sapiens'):
    """Entity with accessioned sequence referring to UniProt."""

    return {
        'name': name,
        'schema_class': 'EntityWithAccessionedSequence',
        'species': species,
        'compartments': ['cytosol'],
        'reference': {
            'database': 'UniProt',
            'identifier': uniprot,
            'gene_names': [name],
        },
    }


def _chemical(name, chebi):
    """Simple entity referring to ChEBI (species independent)."""

    return {
        'name': name,
        'schema_class': 'SimpleEntity',
        'reference': {'database': 'ChEBI', 'identifier': chebi},
    }


# Human proteins: R-HSA-101 .. R-HSA-105 (A .. E).
# Small molecules: water (trivial) and glucose (non-trivial).
#
# Human containers (species roots):
#   201  complex {A, B, C}
#   202  complex {A, B, C, D, E}              (exceeds the default cap)
#   203  complex {A x2, B}
#   204  complex {A, A}                        (homodimer)
#   301  reaction inputs {B, C}, catalyst D
#   302  reaction input {E}, catalyst 201 with active unit A
#   303  reaction inputs {water, glucose, A}
#   401  set {B, C}
#   501  polymer {D}
#
# Containers without species (only reachable as objects):
#   205  complex {A, B, C, D, water}
#   304  reaction inputs {A, B}, catalyst A
#   601  complex {602, A}  and  602  set {601, B}   (containment cycle)
#   701  complex {A, R-HSA-999}                      (dangling reference)
MODEL = {
    'species': [
        {'name': 'Homo sapiens', 'taxon_id': 9606, 'aliases': ['human']},
        {'name': 'Mus musculus', 'taxon_id': 10090, 'aliases': ['mouse']},
    ],
    'entities': {
        'R-HSA-101': _protein('A', 'P00001'),
        'R-HSA-102': _protein('B', 'P00002'),
        'R-HSA-103': _protein('C', 'P00003'),
        'R-HSA-104': _protein('D', 'P00004'),
        'R-HSA-105': _protein('E', 'P00005'),
        'R-ALL-29356': _chemical('water', '15377'),
        'R-ALL-17925': _chemical('glucose', '17234'),
        'R-HSA-201': {
            'name': 'ABC complex',
            'schema_class': 'Complex',
            'species': 'Homo sapiens',
            'hasComponent': ['R-HSA-101', 'R-HSA-102', 'R-HSA-103'],
        },
        'R-HSA-202': {
            'name': 'ABCDE complex',
            'schema_class': 'Complex',
            'species': 'Homo sapiens',
            'hasComponent': [
                'R-HSA-101', 'R-HSA-102', 'R-HSA-103',
                'R-HSA-104', 'R-HSA-105',
            ],
        },
        'R-HSA-203': {
            'name': 'A2B complex',
            'schema_class': 'Complex',
            'species': 'Homo sapiens',
            'hasComponent': [
                {'id': 'R-HSA-101', 'stoichiometry': 2},
                'R-HSA-102',
            ],
        },
        'R-HSA-204': {
            'name': 'A homodimer',
            'schema_class': 'Complex',
            'species': 'Homo sapiens',
            'hasComponent': ['R-HSA-101', 'R-HSA-101'],
        },
        'R-HSA-205': {
            'name': 'ABCD:water complex',
            'schema_class': 'Complex',
            'hasComponent': [
                'R-HSA-101', 'R-HSA-102', 'R-HSA-103',
                'R-HSA-104', 'R-ALL-29356',
            ],
        },
        'R-HSA-301': {
            'name': 'B and C are modified by D',
            'schema_class': 'Reaction',
            'species': 'Homo sapiens',
            'input': ['R-HSA-102', 'R-HSA-103'],
            'catalystActivity': [
                {'id': '3011', 'physicalEntity': 'R-HSA-104'},
            ],
        },
        'R-HSA-302': {
            'name': 'E is modified by ABC',
            'schema_class': 'Reaction',
            'species': 'Homo sapiens',
            'input': ['R-HSA-105'],
            'catalystActivity': [
                {
                    'id': '3021',
                    'physicalEntity': 'R-HSA-201',
                    'activeUnit': ['R-HSA-101'],
                },
            ],
        },
        'R-HSA-303': {
            'name': 'A takes up glucose',
            'schema_class': 'BlackBoxEvent',
            'species': 'Homo sapiens',
            'input': ['R-ALL-29356', 'R-ALL-17925', 'R-HSA-101'],
        },
        'R-HSA-304': {
            'name': 'A modifies itself and B',
            'schema_class': 'Reaction',
            'input': ['R-HSA-101', 'R-HSA-102'],
            'catalystActivity': [
                {'id': '3041', 'physicalEntity': 'R-HSA-101'},
            ],
        },
        'R-HSA-401': {
            'name': 'B or C',
            'schema_class': 'DefinedSet',
            'species': 'Homo sapiens',
            'hasMember': ['R-HSA-102', 'R-HSA-103'],
        },
        'R-HSA-501': {
            'name': 'poly-D',
            'schema_class': 'Polymer',
            'species': 'Homo sapiens',
            'repeatedUnit': ['R-HSA-104'],
        },
        'R-HSA-601': {
            'name': 'cyclic complex',
            'schema_class': 'Complex',
            'hasComponent': ['R-HSA-602', 'R-HSA-101'],
        },
        'R-HSA-602': {
            'name': 'cyclic set',
            'schema_class': 'CandidateSet',
            'hasMember': ['R-HSA-601', 'R-HSA-102'],
        },
        'R-HSA-701': {
            'name': 'broken complex',
            'schema_class': 'Complex',
            'hasComponent': ['R-HSA-101', 'R-HSA-999'],
        },
        'R-MMU-101': _protein('Mouse A', 'Q00001', species='Mus musculus'),
        'R-MMU-102': _protein('Mouse B', 'Q00002', species='Mus musculus'),
        'R-MMU-201': {
            'name': 'Mouse AB complex',
            'schema_class': 'Complex',
            'species': 'Mus musculus',
            'hasComponent': ['R-MMU-101', 'R-MMU-102'],
        },
    },
}

HUMAN_PAIRS = {
    ('R-HSA-101', 'R-HSA-102'),
    ('R-HSA-101', 'R-HSA-103'),
    ('R-HSA-102', 'R-HSA-103'),
    ('R-HSA-102', 'R-HSA-104'),
    ('R-HSA-103', 'R-HSA-104'),
    ('R-HSA-101', 'R-HSA-105'),
    ('R-ALL-17925', 'R-HSA-101'),
}
"""Unique pairs of the human containers with default settings."""


@pytest.fixture
def model_data():
    """Independent copy of the test model document."""

    return copy.deepcopy(MODEL)


@pytest.fixture
def model(model_data):
    """In-memory entity model with the test content."""

    return MemoryEntityModel(model_data)


@pytest.fixture
def model_yaml(tmp_path, model_data):
    """The test model written to a YAML file."""

    path = tmp_path / 'model.yaml'
    path.write_text(yaml.safe_dump(model_data))
    return path


@pytest.fixture
def human_pairs():
    """Expected unique pairs of a default human export."""

    return set(HUMAN_PAIRS)
