# gffplot/main.py
import argparse, sys
from loguru import logger
from . import __version__, file_io, normalizer, visualization
from .errors import GffPlotError
from .layout import LayoutConfig

def setup_logging(verbose=False): logger.remove(); logger.add(sys.stderr, level='DEBUG' if verbose else 'INFO', format='<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>')

def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog='gffplot', description=f'gffplot v{__version__}: plot GFF3 annotations as an interactive HTML/SVG page.', epilog='Usage: gffplot in.gff > out.html')
    parser.add_argument('gff', metavar='GFF', help='The input GFF3 file.')
    parser.add_argument('-o', '--output', help='Write the HTML here instead of stdout.')
    parser.add_argument('--config', help='YAML file with a \'layout\' section overriding the default geometry and colors.')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log per-sequence layout details.')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser.parse_args(argv)

def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.verbose)
    try:
        config = LayoutConfig.from_dict(file_io.load_layout_options(args.config))
        store = normalizer.normalize_records(file_io.read_gff(args.gff))
        document = visualization.render_document(store, config)
    except GffPlotError as e:
        logger.critical(f'{type(e).__name__}: {e}'); sys.exit(1)
    file_io.write_output(document, args.output)
    logger.success(f'gffplot finished: {len(store)} sequence(s) plotted.')

if __name__ == '__main__': main()
