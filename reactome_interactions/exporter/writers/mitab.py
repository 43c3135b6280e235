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
PSI-MITAB 2.7 writer.

Writes the 42 column MITAB 2.7 layout.  Controlled vocabulary terms come
from the PSI-MI ontology:

- detection method: ``MI:0364`` inferred by curator
- interaction type: ``MI:0915`` physical association (complexes,
  polymers), ``MI:0914`` association (sets, reaction inputs),
  ``MI:0414`` enzymatic reaction (catalysis)
- expansion method: ``MI:1061`` matrix expansion for pairs drawn from
  one participant group
- biological role: ``MI:0501`` enzyme, ``MI:0502`` enzyme target,
  ``MI:0499`` unspecified role
"""

from __future__ import annotations

__all__ = ['MitabWriter', 'MITAB_COLUMNS']

import datetime
from typing import TYPE_CHECKING

from .._infer import ACTIVE_UNIT_SUBSTRATE, CATALYST_SUBSTRATE
from .._record import ACTIVE_UNIT, CATALYST, INPUT, EntityKind
from ._base import REACTOME, InteractionWriter, identifier, namespace

if TYPE_CHECKING:
    from pathlib import Path

    from .._record import Entity, Interaction

MITAB_COLUMNS = (
    '#ID(s) interactor A', 'ID(s) interactor B',
    'Alt. ID(s) interactor A', 'Alt. ID(s) interactor B',
    'Alias(es) interactor A', 'Alias(es) interactor B',
    'Interaction detection method(s)',
    'Publication 1st author(s)', 'Publication Identifier(s)',
    'Taxid interactor A', 'Taxid interactor B',
    'Interaction type(s)', 'Source database(s)',
    'Interaction identifier(s)', 'Confidence value(s)',
    'Expansion method(s)',
    'Biological role(s) interactor A', 'Biological role(s) interactor B',
    'Experimental role(s) interactor A', 'Experimental role(s) interactor B',
    'Type(s) interactor A', 'Type(s) interactor B',
    'Xref(s) interactor A', 'Xref(s) interactor B',
    'Interaction Xref(s)',
    'Annotation(s) interactor A', 'Annotation(s) interactor B',
    'Interaction annotation(s)', 'Host organism(s)',
    'Interaction parameter(s)',
    'Creation date', 'Update date',
    'Checksum(s) interactor A', 'Checksum(s) interactor B',
    'Interaction Checksum(s)', 'Negative',
    'Feature(s) interactor A', 'Feature(s) interactor B',
    'Stoichiometry(s) interactor A', 'Stoichiometry(s) interactor B',
    'Identification method participant A',
    'Identification method participant B',
)

_DETECTION = ('MI:0364', 'inferred by curator')
_SOURCE = ('MI:0467', 'reactome')
_MATRIX = ('MI:1061', 'matrix expansion')
_PHYSICAL = ('MI:0915', 'physical association')
_ASSOCIATION = ('MI:0914', 'association')
_ENZYMATIC = ('MI:0414', 'enzymatic reaction')
_UNSPECIFIED_ROLE = ('MI:0499', 'unspecified role')

_INTERACTION_TYPES = {
    'co-complex': _PHYSICAL,
    'co-polymer': _PHYSICAL,
    'co-member': _ASSOCIATION,
    'co-input': _ASSOCIATION,
    CATALYST_SUBSTRATE: _ENZYMATIC,
    ACTIVE_UNIT_SUBSTRATE: _ENZYMATIC,
}

_BIOLOGICAL_ROLES = {
    CATALYST: ('MI:0501', 'enzyme'),
    ACTIVE_UNIT: ('MI:0501', 'enzyme'),
}

_PROTEIN = ('MI:0326', 'protein')
_SMALL_MOLECULE = ('MI:0328', 'small molecule')
_NUCLEIC_ACID = ('MI:0318', 'nucleic acid')
_RNA = ('MI:0320', 'ribonucleic acid')
_UNKNOWN = ('MI:0329', 'unknown participant')

_KIND_TYPES = {
    EntityKind.SIMPLE_ENTITY: _SMALL_MOLECULE,
    EntityKind.COMPLEX: ('MI:0314', 'complex'),
    EntityKind.ENTITY_SET: ('MI:1304', 'molecule set'),
    EntityKind.POLYMER: ('MI:0383', 'biopolymer'),
}

_DATABASE_TYPES = {
    'uniprotkb': _PROTEIN,
    'mirbase': _RNA,
    'ensembl': _NUCLEIC_ACID,
    'refseq': _NUCLEIC_ACID,
    'ddbj/embl/genbank': _NUCLEIC_ACID,
}

_DRUG_TYPES = {
    'ProteinDrug': _PROTEIN,
    'RNADrug': _RNA,
}

_SPECIAL = set('|:()"\t')


def _quote(value: str) -> str:
    """Double-quote a MITAB value containing field syntax characters."""
    if _SPECIAL.intersection(value):
        return '"{}"'.format(value.replace('"', '\\"'))
    return value


def _term(db: str, value: str, text: str | None = None) -> str:
    """``db:value(text)`` with quoting."""
    term = f'{db}:{_quote(value)}'
    return f'{term}({_quote(text)})' if text else term


def _mi(term: tuple[str, str]) -> str:
    return _term('psi-mi', *term)


def _interactor_type(entity: Entity) -> tuple[str, str]:

    if entity.kind in _KIND_TYPES:
        return _KIND_TYPES[entity.kind]

    if entity.kind is EntityKind.DRUG:
        return _DRUG_TYPES.get(entity.schema_class, _SMALL_MOLECULE)

    if entity.kind is EntityKind.EWAS:
        return _DATABASE_TYPES.get(namespace(entity), _PROTEIN)

    return _UNKNOWN


def _biological_role(interaction: Interaction, role: str) -> tuple[str, str]:

    if interaction.interaction_type in (CATALYST_SUBSTRATE, ACTIVE_UNIT_SUBSTRATE):

        if role in _BIOLOGICAL_ROLES:
            return _BIOLOGICAL_ROLES[role]

        if role == INPUT:
            return ('MI:0502', 'enzyme target')

    return _UNSPECIFIED_ROLE


class MitabWriter(InteractionWriter):
    """
    Interactions in PSI-MITAB 2.7 format.

    Args:
        prefix:
            Output path without suffix; the file is
            ``<prefix>.psi-mitab.txt``.
        date:
            Creation and update date recorded on each line.  Defaults to
            today.
    """

    suffix = '.psi-mitab.txt'
    header = MITAB_COLUMNS
    missing = '-'

    def __init__(
        self,
        prefix: Path | str,
        date: datetime.date | None = None,
    ):

        super().__init__(prefix)
        self.date = (date or datetime.date.today()).strftime('%Y/%m/%d')

    def _interactor(self, entity: Entity) -> list[str]:
        """ID, alternative ID, aliases, taxid, type and xrefs columns."""

        ns = namespace(entity)
        primary = _term(ns, identifier(entity))
        alternative = _term(REACTOME, entity.st_id) if ns != REACTOME else ''
        aliases = '|'.join(
            [_term(ns, gene, 'gene name') for gene in entity.gene_names]
            + ([_term(REACTOME, entity.name, 'display name')] if entity.name else [])
        )
        taxid = (
            _term('taxid', entity.taxon_id, entity.species)
            if entity.taxon_id else
            ''
        )
        xrefs = '|'.join(
            _term('go', compartment, 'compartment')
            for compartment in entity.compartments
            if compartment.upper().startswith('GO:')
        )

        return [
            primary,
            alternative,
            aliases,
            taxid,
            _mi(_interactor_type(entity)),
            xrefs,
        ]

    def fields(self, interaction: Interaction) -> list:

        a = self._interactor(interaction.a)
        b = self._interactor(interaction.b)
        itype = _INTERACTION_TYPES.get(interaction.interaction_type, _ASSOCIATION)
        expansion = (
            _mi(_MATRIX)
            if interaction.role_a == interaction.role_b else
            ''
        )
        annotation = _term(
            'comment',
            f'{interaction.interaction_type} in {interaction.context_class} '
            f'{interaction.context_name}'.strip(),
        )

        return [
            a[0], b[0],
            a[1], b[1],
            a[2], b[2],
            _mi(_DETECTION),
            '', '',
            a[3], b[3],
            _mi(itype),
            _mi(_SOURCE),
            _term(REACTOME, interaction.context_id),
            '',
            expansion,
            _mi(_biological_role(interaction, interaction.role_a)),
            _mi(_biological_role(interaction, interaction.role_b)),
            _mi(_UNSPECIFIED_ROLE), _mi(_UNSPECIFIED_ROLE),
            a[4], b[4],
            a[5], b[5],
            '',
            '', '',
            annotation,
            '',
            '',
            self.date, self.date,
            '', '',
            '',
            'false',
            '', '',
            interaction.stoichiometry_a, interaction.stoichiometry_b,
            '', '',
        ]
