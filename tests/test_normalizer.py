import pytest

from gffplot.errors import MalformedIntervalError, MalformedStrandError, MissingAttributeError, UnknownSourceError
from gffplot.normalizer import LABEL_RULES, Source, marker_for, normalize_record, normalize_records
from gffplot.store import Strand

from conftest import CMSCAN_ATTRS, ORF_ATTRS, RRNA_ATTRS, TRNA_ATTRS, make_record


def test_orffinder_label_has_three_lines():
    row = normalize_record(make_record())
    assert row.feature_name == (
        'Pfam accession: PF00115\n'
        'Target name: COX1\n'
        'Description: Cytochrome C oxidase subunit I'
    )
    assert row.source == 'ORFfinder'
    assert row.feature_type == 'CDS'
    assert (row.start, row.end, row.strand) == (1, 100, Strand.FORWARD)


@pytest.mark.parametrize('source,attributes,expected', [
    ('cmscan', CMSCAN_ATTRS, 'Description: mitochondrial 16S rRNA'),
    ('tRNAscan-SE', TRNA_ATTRS, 'tRNA: TAA'),
    ('barrnap:0.9', RRNA_ATTRS, '12S ribosomal RNA: aligned only 80 percent of the 12S'),
])
def test_single_line_labels(source, attributes, expected):
    row = normalize_record(make_record(source=source, attributes=attributes))
    assert row.feature_name == expected
    assert '\n' not in row.feature_name


def test_unknown_source():
    with pytest.raises(UnknownSourceError) as e:
        normalize_record(make_record(source='unknown_tool'))
    assert e.value.source == 'unknown_tool'
    assert 'unknown_tool' in str(e.value)


def test_orffinder_missing_description():
    attrs = {k: v for k, v in ORF_ATTRS.items() if k != 'description'}
    with pytest.raises(MissingAttributeError) as e:
        normalize_record(make_record(attributes=attrs))
    assert e.value.attribute == 'description'
    assert e.value.source == 'ORFfinder'


@pytest.mark.parametrize('source,attributes', [
    ('cmscan', {}),
    ('tRNAscan-SE', {'gene_biotype': 'tRNA'}),
    ('barrnap:0.9', {'note': 'partial'}),
])
def test_missing_attribute_per_source(source, attributes):
    with pytest.raises(MissingAttributeError):
        normalize_record(make_record(source=source, attributes=attributes))


@pytest.mark.parametrize('value,expected', [
    ('+', Strand.FORWARD),
    ('-', Strand.REVERSE),
    ('.', Strand.UNKNOWN),
    ('?', Strand.UNKNOWN),
])
def test_strand_resolution(value, expected):
    assert normalize_record(make_record(strand=value)).strand is expected


def test_malformed_strand():
    with pytest.raises(MalformedStrandError):
        normalize_record(make_record(strand='x'))


def test_start_after_end():
    with pytest.raises(MalformedIntervalError):
        normalize_record(make_record(start=200, end=100))


def test_exons_are_skipped():
    records = [
        make_record(source='tRNAscan-SE', featuretype='tRNA', attributes=TRNA_ATTRS),
        make_record(source='tRNAscan-SE', featuretype='exon', attributes={}),
    ]
    store = normalize_records(records)
    assert [r.feature_type for r in store.rows('chrM')] == ['tRNA']


def test_grouping_keeps_input_order_within_sequence():
    records = [
        make_record(seqid='contig_2', start=500, end=900),
        make_record(seqid='contig_1', start=10, end=20),
        make_record(seqid='contig_2', start=1, end=50),
    ]
    store = normalize_records(records)
    assert store.sequences() == ['contig_1', 'contig_2']
    assert [r.start for r in store.rows('contig_2')] == [500, 1]
    assert store.max_end('contig_2') == 900
    assert len(store) == 2


def test_empty_input():
    assert len(normalize_records([])) == 0


def test_every_source_has_a_rule_and_marker():
    assert set(LABEL_RULES) == set(Source)
    assert len({s.marker_id for s in Source}) == len(Source)
    assert [s.palette_index for s in Source] == [0, 1, 2, 3]
    assert marker_for('cmscan') == 'point_cmscan'
    assert marker_for('prokka') is None
