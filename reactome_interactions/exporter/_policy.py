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
Participant admission policies.

Two policies decide which participants of a container take part in
pair generation:

- The simple entity policy removes small molecules (all of them, or only
  the trivial ones such as water, protons and common cofactors).
- The size cap discards whole role groups that are too large to expand
  combinatorially.  Groups are never truncated.

Filtering always happens first, so removed small molecules do not count
toward the size cap.
"""

from __future__ import annotations

__all__ = [
    'SimpleEntityPolicy',
    'TrivialChemicals',
    'admits',
    'filter_group',
    'within_cap',
]

import enum
import logging
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

import yaml

from ._errors import ConfigError
from ._record import EntityKind
from .data import data_path

if TYPE_CHECKING:
    from pathlib import Path

    from ._record import Entity

_log = logging.getLogger(__name__)

_TRIVIAL_FILE = 'trivial_chemicals.yaml'


class SimpleEntityPolicy(enum.Enum):
    """Which simple entities (small molecules) are exported."""

    ALL = 'ALL'
    NONE = 'NONE'
    NON_TRIVIAL = 'NON_TRIVIAL'

    @classmethod
    def parse(cls, value: str | SimpleEntityPolicy | None) -> SimpleEntityPolicy:
        """
        Case-insensitive lookup of a policy by name.

        Raises:
            ConfigError: If *value* names no policy.
        """

        if isinstance(value, cls):
            return value

        if value is None:
            raise ConfigError('Missing simple entities policy.')

        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            raise ConfigError(
                f'Unknown simple entities policy: {value!r}. '
                f'Available: {[p.name for p in cls]}'
            ) from None


class TrivialChemicals:
    """
    Predicate telling whether a small molecule is trivial.

    Matches entities by ChEBI identifier against a reference list.  The
    built-in list lives in ``data/trivial_chemicals.yaml``; any YAML file
    with a top level ``trivial`` list can replace it.

    Args:
        identifiers:
            ChEBI IDs (``'CHEBI:15377'`` or bare ``'15377'``).  If
            ``None``, the built-in list is loaded.
    """

    def __init__(self, identifiers: Iterable[str] | None = None):

        if identifiers is None:
            identifiers = self._load(data_path(_TRIVIAL_FILE))

        self.identifiers = frozenset(_chebi(i) for i in identifiers)

    @classmethod
    def from_yaml(cls, path: Path | str) -> TrivialChemicals:

        return cls(cls._load(path))

    @staticmethod
    def _load(path: Path | str) -> list[str]:
        """
        ChEBI IDs listed under ``trivial`` in a YAML file.

        Raises:
            ConfigError: If the file cannot be read or has no such list.
        """

        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(
                f'Cannot load trivial chemicals from {path}: {e}'
            ) from e

        trivial = data.get('trivial', []) if isinstance(data, dict) else None

        if not isinstance(trivial, list):
            raise ConfigError(
                f'Trivial chemicals file {path} must contain a `trivial` list.'
            )

        return [str(i) for i in trivial]

    def __call__(self, entity: Entity) -> bool:

        return entity.chebi_id in self.identifiers

    def __len__(self) -> int:

        return len(self.identifiers)


def _chebi(identifier: str) -> str:

    identifier = identifier.strip()

    if identifier.upper().startswith('CHEBI:'):
        return f'CHEBI:{identifier[6:]}'

    return f'CHEBI:{identifier}'


def admits(
    entity: Entity,
    policy: SimpleEntityPolicy,
    is_trivial: Callable[[Entity], bool],
) -> bool:
    """
    Decide whether *entity* takes part in pair generation.

    Only simple entities are subject to the policy; every other variant
    is always admitted.
    """

    if entity.kind is not EntityKind.SIMPLE_ENTITY:
        return True

    if policy is SimpleEntityPolicy.ALL:
        return True

    if policy is SimpleEntityPolicy.NONE:
        return False

    return not is_trivial(entity)


def filter_group(
    group: dict[Entity, int],
    policy: SimpleEntityPolicy,
    is_trivial: Callable[[Entity], bool],
) -> dict[Entity, int]:
    """Keep the admitted entities of one role group with their stoichiometry."""

    return {
        entity: n
        for entity, n in group.items()
        if admits(entity, policy, is_trivial)
    }


def within_cap(size: int, max_unit_size: int, minimum: int = 2) -> bool:
    """
    Whether a role group of *size* admitted entities may be expanded.

    Args:
        size:
            Number of distinct admitted entities in the group.
        max_unit_size:
            Largest group that is expanded.
        minimum:
            Smallest useful group: 2 for pairs within one group, 1 for
            one side of a cross-role product.
    """

    return minimum <= size <= max_unit_size
