# gffplot/errors.py


class GffPlotError(Exception):
    """Base class for every error that aborts a plotting run."""
    pass


class UnknownSourceError(GffPlotError):
    """
    raised when a record comes from an annotation tool we have no labeling rule for
    """

    def __init__(self, source):
        self.source = source
        super().__init__(f'Unknown annotation source \'{source}\'. Expected one of: ORFfinder, cmscan, tRNAscan-SE, barrnap:0.9')


class MissingAttributeError(GffPlotError):
    """
    raised when a record lacks an attribute its source always provides
    """

    def __init__(self, source, attribute, seqid=None):
        self.source, self.attribute, self.seqid = source, attribute, seqid
        where = f' on sequence \'{seqid}\'' if seqid else ''
        super().__init__(f'Record from \'{source}\'{where} is missing required attribute \'{attribute}\'')


class MalformedStrandError(GffPlotError):

    def __init__(self, value):
        self.value = value
        super().__init__(f'Strand \'{value}\' is not one of \'+\', \'-\', \'.\' or \'?\'')


class MalformedIntervalError(GffPlotError):

    def __init__(self, seqid, start, end):
        self.seqid, self.start, self.end = seqid, start, end
        super().__init__(f'Feature on \'{seqid}\' starts after it ends ({start} > {end})')


class DegenerateRangeError(GffPlotError):
    """
    raised when a scaling range has zero width, e.g. a sequence whose only feature ends at 0
    """

    def __init__(self, data_min, data_max):
        self.data_min, self.data_max = data_min, data_max
        super().__init__(f'Cannot scale over an empty data range [{data_min}, {data_max}]')


class ConfigError(GffPlotError):
    pass
