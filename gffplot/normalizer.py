# gffplot/normalizer.py
import enum
from collections import namedtuple
from loguru import logger
from .errors import MalformedIntervalError, MissingAttributeError, UnknownSourceError
from .store import AnnotationStore, Row, Strand

# tRNAscan-SE writes an exon for every tRNA it already reports as a gene.
SKIPPED_FEATURE_TYPES = {'exon'}

LabelRule = namedtuple('LabelRule', ['attributes', 'template', 'marker_id'])


class Source(enum.Enum):
    """Annotation tools we know how to label. Order matches the marker palette."""
    ORFFINDER = 'ORFfinder'
    CMSCAN = 'cmscan'
    TRNASCAN = 'tRNAscan-SE'
    BARRNAP = 'barrnap:0.9'

    @classmethod
    def lookup(cls, value):
        try: return cls(value)
        except ValueError: raise UnknownSourceError(value) from None

    @property
    def rule(self): return LABEL_RULES[self]

    @property
    def marker_id(self): return self.rule.marker_id

    @property
    def palette_index(self): return list(Source).index(self)

    def make_label(self, attributes, seqid=None):
        values = {}
        for key in self.rule.attributes:
            if key not in attributes: raise MissingAttributeError(self.value, key, seqid)
            values[key] = attributes[key]
        return self.rule.template.format(**values)


LABEL_RULES = {
    Source.ORFFINDER: LabelRule(
        ('pfam_accession', 'target_name', 'description'),
        'Pfam accession: {pfam_accession}\nTarget name: {target_name}\nDescription: {description}',
        'point_orf'),
    Source.CMSCAN: LabelRule(('description',), 'Description: {description}', 'point_cmscan'),
    Source.TRNASCAN: LabelRule(('gene_biotype', 'anticodon'), '{gene_biotype}: {anticodon}', 'point_trna'),
    Source.BARRNAP: LabelRule(('product', 'note'), '{product}: {note}', 'point_rrna'),
}


def marker_for(source):
    """Marker id for a source string, or None for a source we do not draw arrows for."""
    try: return Source(source).marker_id
    except ValueError: return None


def normalize_record(record):
    source = Source.lookup(record.source)
    if record.start > record.end: raise MalformedIntervalError(record.seqid, record.start, record.end)
    return Row(
        feature_name=source.make_label(record.attributes, record.seqid),
        source=record.source,
        feature_type=record.featuretype,
        start=record.start,
        end=record.end,
        strand=Strand.from_gff(record.strand),
    )


def normalize_records(records):
    """Label every record by its source and group the rows by sequence, keeping input order."""
    store, skipped = AnnotationStore(), 0
    for record in records:
        if record.featuretype in SKIPPED_FEATURE_TYPES:
            skipped += 1; continue
        store.add(record.seqid, normalize_record(record))
    if skipped: logger.debug(f'Skipped {skipped} exon record(s).')
    if not store: logger.warning('No plottable features found; the plot will be empty.')
    n_rows = sum(len(store.rows(s)) for s in store)
    logger.info(f'Normalized {n_rows} feature(s) across {len(store)} sequence(s).')
    return store
