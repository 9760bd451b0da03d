# gffplot/file_io.py
import os, sys
from collections import namedtuple
import gffutils
import yaml
from loguru import logger
from .errors import ConfigError

GffRecord = namedtuple('GffRecord', ['seqid', 'source', 'featuretype', 'start', 'end', 'strand', 'attributes'])

DEFAULT_CONFIG = os.path.join(os.path.dirname(os.path.realpath(__file__)), 'config', 'gffplot.yaml')

def _flatten_attributes(attributes):
    # gffutils splits values on commas; descriptions legitimately contain them.
    return {key: ','.join(values) if isinstance(values, (list, tuple)) else values for key, values in attributes.items()}

def _to_record(feature):
    return GffRecord(feature.seqid, feature.source, feature.featuretype, feature.start, feature.end, feature.strand, _flatten_attributes(feature.attributes))

def read_gff(file_path):
    """Reads every feature of a GFF3 file, in file order."""
    if not os.path.isfile(file_path): logger.critical(f'GFF not found: {file_path}'); sys.exit(1)
    records = [_to_record(f) for f in gffutils.DataIterator(file_path)]
    logger.info(f'Read {len(records)} record(s) from {os.path.basename(file_path)}.')
    return records

def load_config(config_path):
    if config_path and os.path.exists(config_path):
        with open(config_path, 'r') as f: return yaml.safe_load(f) or {}
    return {}

def load_layout_options(user_config=None):
    """Packaged defaults, then ./gffplot.yaml, then an explicit --config file."""
    if user_config and not os.path.exists(user_config): logger.critical(f'Config not found: {user_config}'); sys.exit(1)
    options = {}
    for path in (DEFAULT_CONFIG, 'gffplot.yaml', user_config):
        loaded = load_config(path)
        if not loaded: continue
        layout = loaded.get('layout') if isinstance(loaded, dict) else None
        if not isinstance(layout, dict): raise ConfigError(f'{path}: expected a \'layout\' mapping.')
        logger.debug(f'Loaded layout options from {path}: {", ".join(layout)}')
        options.update(layout)
    return options

def write_output(data, output_path=None):
    """Writes the finished document to output_path, or to stdout when no path is given."""
    if output_path:
        abs_path = os.path.abspath(output_path)
        os.makedirs(os.path.dirname(abs_path), exist_ok=True)
        with open(abs_path, 'w', encoding='utf-8') as f: f.write(data)
        logger.success(f'Wrote plot to {abs_path}')
    else:
        sys.stdout.write(data)
