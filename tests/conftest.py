import pytest
from loguru import logger

from gffplot.file_io import GffRecord

GFF_HEADER = '##gff-version 3\n'

ORF_ATTRS = {'pfam_accession': 'PF00115', 'target_name': 'COX1', 'description': 'Cytochrome C oxidase subunit I'}
CMSCAN_ATTRS = {'description': 'mitochondrial 16S rRNA'}
TRNA_ATTRS = {'gene_biotype': 'tRNA', 'anticodon': 'TAA'}
RRNA_ATTRS = {'product': '12S ribosomal RNA', 'note': 'aligned only 80 percent of the 12S'}


class StubRng:
    """Returns the low end of every requested range and remembers the ranges."""

    def __init__(self):
        self.calls = []

    def uniform(self, a, b):
        self.calls.append((a, b))
        return a


def make_record(seqid='chrM', source='ORFfinder', featuretype='CDS', start=1, end=100, strand='+', attributes=None):
    return GffRecord(seqid, source, featuretype, start, end, strand, dict(ORF_ATTRS if attributes is None else attributes))


def gff_line(seqid, source, featuretype, start, end, strand, attributes):
    attrs = ';'.join(f'{k}={v}' for k, v in attributes.items())
    return '\t'.join([seqid, source, featuretype, str(start), str(end), '.', strand, '.', attrs]) + '\n'


@pytest.fixture
def write_gff(tmp_path):
    def _write(lines, name='in.gff'):
        path = tmp_path / name
        path.write_text(GFF_HEADER + ''.join(lines))
        return str(path)
    return _write


@pytest.fixture
def stub_rng():
    return StubRng()


@pytest.fixture(autouse=True)
def _reset_logger():
    yield
    logger.remove()
