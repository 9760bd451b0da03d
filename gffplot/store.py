# gffplot/store.py
import enum
from typing import NamedTuple
from .errors import MalformedStrandError


class Strand(enum.Enum):
    FORWARD = '+'
    REVERSE = '-'
    UNKNOWN = '.'

    @classmethod
    def from_gff(cls, value):
        """Resolve a GFF strand column. '?' and an empty column both mean unknown."""
        if value is None or value in ('', '.', '?'): return cls.UNKNOWN
        if value == '+': return cls.FORWARD
        if value == '-': return cls.REVERSE
        raise MalformedStrandError(value)


class Row(NamedTuple):
    feature_name: str
    source: str
    feature_type: str
    start: int
    end: int
    strand: Strand


class AnnotationStore:
    """
    Rows grouped by sequence identifier.

    Sequences iterate in lexicographic order. Rows keep the order they were added in,
    which is the order of the input file and is not necessarily sorted by position.
    """

    def __init__(self):
        self._data = {}

    def add(self, seqid, row):
        self._data.setdefault(seqid, []).append(row)

    def sequences(self):
        return sorted(self._data)

    def rows(self, seqid):
        return tuple(self._data[seqid])

    def items(self):
        return [(seqid, tuple(self._data[seqid])) for seqid in self.sequences()]

    def max_end(self, seqid):
        return max(row.end for row in self._data[seqid])

    def __len__(self): return len(self._data)

    def __iter__(self): return iter(self.sequences())

    def __contains__(self, seqid): return seqid in self._data

    def __repr__(self):
        counts = ', '.join(f'{s}={len(self._data[s])}' for s in self.sequences())
        return f'AnnotationStore({counts})'
