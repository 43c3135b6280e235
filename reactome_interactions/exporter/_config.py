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
Exporter configuration.

Built-in defaults come from a YAML file shipped with the package.
Overrides are merged on top of them as dicts, YAML files or keyword
arguments, and :func:`settings` validates the merged result into an
immutable :class:`ExportSettings` for one export run.
"""

from __future__ import annotations

__all__ = ['config', 'default_config', 'settings', 'ExportSettings']

import copy
from typing import TYPE_CHECKING, NamedTuple

import yaml

from ._errors import ConfigError
from ._policy import SimpleEntityPolicy
from .data import data_path

if TYPE_CHECKING:
    from pathlib import Path


_DATABASE_KEYS = frozenset({'host', 'port', 'user', 'password'})


class ExportSettings(NamedTuple):
    """Validated settings of one export run."""

    max_unit_size: int
    policy: SimpleEntityPolicy
    species: tuple[str, ...]
    objects: tuple[str, ...]
    output: str | None = None
    workers: int = 1
    progress: bool = False
    verbose: bool = False
    trivial_chemicals: str | None = None


def default_config() -> dict:
    """
    Load the built-in default configuration.

    Returns:
        Nested dict with the full default config.
    """

    return _load_yaml(data_path('default_config.yaml'))


def config(
    *args: dict | Path | str,
    **kwargs,
) -> dict:
    """
    Build a configuration by merging defaults with overrides.

    Positional arguments are applied first (dicts or YAML file paths),
    then keyword arguments are merged as a final layer.  Keyword
    arguments naming a database connection parameter (``host``,
    ``port``, ``user``, ``password``) are shorthand for nesting them
    under ``database``.

    Args:
        *args:
            Dicts or paths to YAML files.  Later values take
            precedence over earlier ones.
        **kwargs:
            Config keys merged last.

    Returns:
        Merged configuration dict.

    Examples::

        # Use all defaults
        cfg = config()

        # Larger complexes and sets, mouse only
        cfg = config(max_unit_size=8, species=['Mus musculus'])

        # Load from a YAML file, then point to another server
        cfg = config('my_config.yaml', host='bolt://reactome:7687')
    """

    result = default_config()

    for arg in args:
        if isinstance(arg, dict):
            layer = arg
        else:
            layer = _load_yaml(arg)

        _deep_merge(result, layer)

    if kwargs:
        _deep_merge(result, _expand_kwargs(kwargs))

    return result


def settings(
    *args: dict | Path | str,
    **kwargs,
) -> ExportSettings:
    """
    Merge and validate a configuration into :class:`ExportSettings`.

    Accepts the same arguments as :func:`config`.

    Raises:
        ConfigError: If a value is missing or malformed.
    """

    cfg = config(*args, **kwargs)

    max_unit_size = _positive_int(cfg.get('max_unit_size'), 'max_unit_size')
    workers = _positive_int(cfg.get('workers', 1), 'workers')
    policy = SimpleEntityPolicy.parse(cfg.get('simple_entities_policy'))

    objects = _names(cfg.get('objects'), 'objects')
    species = _names(cfg.get('species'), 'species')

    if not objects and not species:
        raise ConfigError('Either `objects` or `species` must be given.')

    output = cfg.get('output')

    if output is not None and not str(output).strip():
        raise ConfigError('Output prefix must not be empty.')

    trivial = cfg.get('trivial_chemicals')

    return ExportSettings(
        max_unit_size=max_unit_size,
        policy=policy,
        species=species,
        objects=objects,
        output=str(output) if output is not None else None,
        workers=workers,
        progress=bool(cfg.get('progress', False)),
        verbose=bool(cfg.get('verbose', False)),
        trivial_chemicals=str(trivial) if trivial else None,
    )


def _positive_int(value, key: str) -> int:

    if isinstance(value, bool):
        raise ConfigError(f'`{key}` must be an integer, got {value!r}.')

    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ConfigError(
            f'`{key}` must be an integer, got {value!r}.'
        ) from None

    if number < 1:
        raise ConfigError(f'`{key}` must be at least 1, got {number}.')

    return number


def _names(value, key: str) -> tuple[str, ...]:
    """Normalise a scalar or list config value into a tuple of strings."""

    if value is None:
        return ()

    if isinstance(value, str):
        value = [value]

    if not isinstance(value, (list, tuple)):
        raise ConfigError(f'`{key}` must be a string or a list of strings.')

    return tuple(str(v).strip() for v in value if str(v).strip())


def _expand_kwargs(kwargs: dict) -> dict:
    """
    Expand shorthand kwargs into the full config structure.

    Database connection keys are moved under ``database``; everything
    else passes through as-is.
    """

    expanded: dict = {}
    database: dict = {}

    for key, value in kwargs.items():
        if key in _DATABASE_KEYS:
            database[key] = value
        else:
            expanded[key] = value

    if database:
        expanded.setdefault('database', {})
        _deep_merge(expanded['database'], database)

    return expanded


def _load_yaml(path: Path | str) -> dict:
    """
    Load a YAML file and return its contents as a dict.

    Raises:
        ConfigError: If the file cannot be read or parsed.
    """

    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f'Cannot load config from {path}: {e}') from e

    if not isinstance(data, dict):
        raise ConfigError(f'Config file {path} must contain a mapping.')

    return data


def _deep_merge(base: dict, override: dict) -> dict:
    """
    Recursively merge *override* into *base* in place.

    For nested dicts, values are merged recursively. For all other
    types (including lists), the override value replaces the base.

    Returns:
        The mutated *base* dict.
    """

    for key, value in override.items():
        if (
            key in base
            and isinstance(base[key], dict)
            and isinstance(value, dict)
        ):
            _deep_merge(base[key], value)
        else:
            base[key] = copy.deepcopy(value)

    return base
