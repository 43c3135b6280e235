#!/usr/bin/env python

"""Tests for reactome_interactions.exporter._export module."""

import pytest

from reactome_interactions.exporter._errors import EncodingError, ExportError
from reactome_interactions.exporter._export import export
from reactome_interactions.exporter._stream import stream
from reactome_interactions.exporter.writers import MitabWriter, TsvWriter


class _FailingWriter(TsvWriter):
    """Writer whose disk fills up after *limit* lines."""

    suffix = '.failing.txt'

    def __init__(self, prefix, limit=1):

        super().__init__(prefix)
        self.limit = limit

    def write(self, interaction):

        if self.written >= self.limit:
            raise EncodingError(self.path, 'No space left on device')

        super().write(interaction)


def _data_lines(path):

    return path.read_text().splitlines()[1:]


class TestExport:

    def test_both_formats(self, model, tmp_path, human_pairs):
        prefix = tmp_path / 'reactome'
        writers = [MitabWriter(prefix), TsvWriter(prefix)]

        n = export(stream(model), writers)

        assert n == len(human_pairs)

        for w in writers:
            assert w.path.exists()
            assert len(_data_lines(w.path)) == n

        assert sorted(p.name for p in tmp_path.iterdir()) == [
            'reactome.psi-mitab.txt',
            'reactome.tab-delimited.txt',
        ]

    def test_same_interactions_in_every_output(self, model, tmp_path):
        prefix = tmp_path / 'reactome'
        mitab, tsv = MitabWriter(prefix), TsvWriter(prefix)

        export(stream(model), [mitab, tsv])

        mitab_ids = [
            line.replace('"', '').split('\t')[:2]
            for line in _data_lines(mitab.path)
        ]
        tsv_ids = [
            [f'{ns}:{ident}' for ident, ns in ((f[0], f[1]), (f[6], f[7]))]
            for f in (line.split('\t') for line in _data_lines(tsv.path))
        ]

        assert mitab_ids == tsv_ids

    def test_failing_writer_isolated(self, model, tmp_path):
        prefix = tmp_path / 'reactome'
        failing = _FailingWriter(prefix, limit=2)
        tsv = TsvWriter(prefix)

        with pytest.raises(ExportError) as e:
            export(stream(model), [failing, tsv])

        assert [f.path for f in e.value.failures] == [failing.path]
        assert tsv.path.exists()
        assert not failing.path.exists()
        assert not failing.partial.exists()

    def test_open_failure(self, model, tmp_path):
        broken = TsvWriter(tmp_path / 'absent' / 'reactome')
        mitab = MitabWriter(tmp_path / 'reactome')

        with pytest.raises(ExportError):
            export(stream(model), [broken, mitab])

        assert mitab.path.exists()

    def test_stream_failure_discards_all(self, model, tmp_path):

        def _broken():

            yield from stream(model, objects=['R-HSA-201'])
            raise RuntimeError('lost connection')

        writers = [MitabWriter(tmp_path / 'x'), TsvWriter(tmp_path / 'x')]

        with pytest.raises(RuntimeError, match='lost connection'):
            export(_broken(), writers)

        assert list(tmp_path.iterdir()) == []

    def test_no_writers_left(self, model, tmp_path):
        broken = TsvWriter(tmp_path / 'absent' / 'reactome')

        with pytest.raises(ExportError):
            export(stream(model), [broken])
