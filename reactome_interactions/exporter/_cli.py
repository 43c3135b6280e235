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
Export inferred Reactome interactions to PSI-MITAB and TSV files.

Pipeline::

    resolve roots → infer interactions → deduplicate → write files

Usage::

    reactome-interactions --host localhost -u neo4j -p secret -o reactome

    # Every species, larger complexes, all small molecules
    reactome-interactions --host bolt://reactome:7687 -u neo4j -p secret \\
        -o reactome_all -s ALL -m 8 -t ALL

    # Only a few objects, with a progress bar
    reactome-interactions --host localhost -u neo4j -p secret -o sample \\
        -O R-HSA-5672710 -O R-HSA-176374 --progress

Outputs ``<output>.psi-mitab.txt`` and ``<output>.tab-delimited.txt``.
Exits with 0 on success, 1 if the export fails, 2 on invalid arguments.
"""

from __future__ import annotations

__all__ = ['main']

import argparse
import logging
import sys
import time
from datetime import timedelta

from ._config import config, settings
from ._errors import ConfigError, ExporterError
from ._export import export
from ._stream import InteractionStream
from .model import Neo4jEntityModel
from .writers import MitabWriter, TsvWriter

_log = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog='reactome-interactions',
        description='Export interactions inferred from Reactome.',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    # --- database ------------------------------------------------------------
    p.add_argument(
        '--host', required=True,
        help='Neo4j bolt URI or host name.',
    )
    p.add_argument('--port', type=int, default=None,
                   help='Port used when --host has none (default 7687).')
    p.add_argument('-u', '--user', required=True, help='Database user.')
    p.add_argument('-p', '--password', required=True, help='Database password.')
    p.add_argument('--database', default=None,
                   help='Neo4j database name (server default if omitted).')

    # --- roots ---------------------------------------------------------------
    p.add_argument(
        '-s', '--species', action='append', default=None,
        help=(
            'Species name, alias or taxonomy ID.  Repeatable.  '
            '"ALL" exports every species (default: Homo sapiens).'
        ),
    )
    p.add_argument(
        '-O', '--object', dest='objects', action='append', default=None,
        help='Stable identifier of a root object.  Repeatable; overrides --species.',
    )

    # --- inference -----------------------------------------------------------
    p.add_argument(
        '-m', '--max-unit-size', '--maxUnitSize', dest='max_unit_size',
        type=int, default=None,
        help='Largest participant group expanded into pairs (default 4).',
    )
    p.add_argument(
        '-t', '--simple-entities-policy', '--simpleEntitiesPolicy',
        dest='simple_entities_policy', default=None,
        help='Small molecules to export: ALL, NONE or NON_TRIVIAL (default).',
    )

    # --- run -----------------------------------------------------------------
    p.add_argument('-o', '--output', required=True,
                   help='Output path prefix.')
    p.add_argument('--workers', type=int, default=None,
                   help='Roots expanded in parallel (default 1).')
    p.add_argument('--progress', action='store_true', default=None,
                   help='Show a progress bar.')
    p.add_argument('-v', '--verbose', action='store_true', default=None,
                   help='Log debug messages.')
    p.add_argument('--config', default=None,
                   help='YAML file merged over the built-in defaults.')

    return p.parse_args(argv)


def _overrides(args: argparse.Namespace) -> dict:
    """Config keys set on the command line."""

    keys = (
        'host', 'port', 'user', 'password',
        'output', 'max_unit_size', 'simple_entities_policy',
        'species', 'objects', 'workers', 'progress', 'verbose',
    )
    result = {
        key: getattr(args, key)
        for key in keys
        if getattr(args, key) is not None
    }

    if args.database is not None:
        result['database'] = {'name': args.database}

    return result


def main(argv: list[str] | None = None) -> int:
    """
    Run one export from command line arguments.

    Returns:
        Process exit status.
    """

    args = _parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    start = time.monotonic()

    try:
        cfg = config(*filter(None, [args.config]), **_overrides(args))
        opts = settings(cfg)

        if not opts.output:
            raise ConfigError('Missing output prefix.')

        if opts.verbose:
            logging.getLogger().setLevel(logging.DEBUG)

        _log.debug(
            '[interactions] Output prefix: %s; max_unit_size=%d; '
            'simple_entities_policy=%s; objects=%s; species=%s; workers=%d.',
            opts.output,
            opts.max_unit_size,
            opts.policy.name,
            list(opts.objects),
            list(opts.species),
            opts.workers,
        )

        db = cfg.get('database') or {}

        with Neo4jEntityModel(
            host=db.get('host'),
            user=db.get('user'),
            password=db.get('password'),
            port=db.get('port') or 7687,
            database=db.get('name'),
        ) as model:

            interactions = InteractionStream.from_settings(model, opts)
            n = export(
                interactions,
                [MitabWriter(opts.output), TsvWriter(opts.output)],
            )

    except ExporterError as e:
        _log.error('[interactions] Export failed: %s', e)
        return 1

    _log.info(
        '[interactions] Exported %d interactions in %s.',
        n,
        timedelta(seconds=round(time.monotonic() - start)),
    )

    return 0


if __name__ == '__main__':
    sys.exit(main())
