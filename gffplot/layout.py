# gffplot/layout.py
import html, json, random
from dataclasses import dataclass, fields
from loguru import logger
from .errors import ConfigError
from .normalizer import Source, marker_for
from .store import Strand
from .utils.scale_utils import format_axis_label, format_bp_pretty, scale

N_AXIS_TICKS = 6
LABEL_Y_OFFSET, TICK_Y_OFFSET = 15, 15
# Jitter bands, in pixels above the baseline.
FORWARD_BAND = (10, 70)
REVERSE_BAND_START, REVERSE_BAND_PADDING = 80, 25


@dataclass(frozen=True)
class LayoutConfig:
    width: int = 1200
    subplot_height: int = 200
    margin: int = 35
    midline_offset: int = 75
    colors: tuple = ('#26547c', '#ef476f', '#ffd166', '#06d6a0')
    title: str = 'Annotated Mito'

    @classmethod
    def from_dict(cls, values):
        known = {f.name for f in fields(cls)}
        unknown = set(values) - known
        if unknown: raise ConfigError(f'Unknown layout option(s): {", ".join(sorted(unknown))}')
        values = dict(values)
        if 'colors' in values: values['colors'] = tuple(values['colors'])
        config = cls(**values)
        config.validate()
        return config

    def validate(self):
        if len(self.colors) != len(Source):
            raise ConfigError(f'Expected {len(Source)} colors (one per annotation source), got {len(self.colors)}.')
        for name in ('width', 'subplot_height', 'margin'):
            if not isinstance(getattr(self, name), int) or getattr(self, name) <= 0:
                raise ConfigError(f'Layout option \'{name}\' must be a positive integer, got {getattr(self, name)!r}.')
        if self.width <= 2 * self.margin: raise ConfigError('Width must exceed twice the margin.')
        if self.subplot_height - self.margin - REVERSE_BAND_PADDING < REVERSE_BAND_START:
            raise ConfigError(f'Subplot height {self.subplot_height} leaves no room for reverse-strand features.')

    def color_for(self, source): return self.colors[source.palette_index]


def _js_arg(text):
    """Encode text as a JS string literal safe to place inside a single-quoted attribute."""
    return html.escape(json.dumps(text), quote=True)


def hover_payload(row):
    label = '<br/>'.join(html.escape(line) for line in row.feature_name.split('\n'))
    return f'<b>{label}</b><br/>{format_bp_pretty(row.start)} &rarr; {format_bp_pretty(row.end)} bp'


def jitter_y(strand, y_baseline, config, rng):
    if strand is Strand.REVERSE:
        return rng.uniform(y_baseline - (config.subplot_height - config.margin - REVERSE_BAND_PADDING), y_baseline - REVERSE_BAND_START)
    return rng.uniform(y_baseline - FORWARD_BAND[1], y_baseline - FORWARD_BAND[0])


def _feature_markup(row, x_range, data_max, y_baseline, config, rng):
    x1 = scale(row.start, 0, data_max, *x_range)
    x2 = scale(row.end, 0, data_max, *x_range)
    if row.strand is Strand.REVERSE: x1, x2 = x2, x1
    marker_id = marker_for(row.source)
    marker = f" marker-end='url(#{marker_id})'" if marker_id else ''
    y = jitter_y(row.strand, y_baseline, config, rng)
    hover, label = _js_arg(hover_payload(row)), _js_arg(row.feature_name)
    handlers = f"onmousemove='showTooltip(evt, {hover});' onmouseout='hideTooltip();'"
    return [
        f"<line class='feature' x1='{x1}' y1='{y}' x2='{x2}' y2='{y}' stroke='black' style='stroke-width: 3;'{marker} {handlers} onclick='addTextOnClick(evt, {label});'/>",
        # markers do not receive pointer events, so give the arrow tip its own hit target
        f"<circle r='5' fill='transparent' cx='{x2}' cy='{y}' {handlers}></circle>",
    ]


def _axis_ticks(data_max, x_range, y_baseline, config):
    ticks = []
    for i in range(N_AXIS_TICKS):
        value = round(i * data_max / (N_AXIS_TICKS - 1))
        x = scale(value, 0, data_max, *x_range) if i else config.margin
        ticks.append(f"<text x='{x}' y='{y_baseline + TICK_Y_OFFSET}' class='small' text-anchor='middle' font-family='monospace'>{format_axis_label(value)}</text>")
    return ticks


def generate_subplot(el, seqid, rows, data_max, config, rng):
    """Markup for one sequence drawn in the el-th band (1-based, counted from the top)."""
    x_left, x_right = config.margin, config.width - config.margin
    y1 = config.subplot_height * el - config.margin
    y_mid = y1 - config.midline_offset
    y_label = y1 - config.subplot_height + config.margin + LABEL_Y_OFFSET
    svg = [
        f"<line class='baseline' x1='{x_left}' y1='{y1}' x2='{x_right}' y2='{y1}' stroke='black' style='stroke-width: 3;' />",
        f"<line class='midline' x1='{x_left}' y1='{y_mid}' x2='{x_right}' y2='{y_mid}' stroke='black' stroke-dasharray='4' style='stroke-width: 1;' />",
        f"<text x='{x_left}' y='{y_label}' font-weight='bold' class='small' font-family='monospace'>{html.escape(seqid)}</text>",
    ]
    for row in rows: svg.extend(_feature_markup(row, (x_left, x_right), data_max, y1, config, rng))
    svg.extend(_axis_ticks(data_max, (x_left, x_right), y1, config))
    return svg


def generate_plot_annotations(store, config=None, rng=None):
    """
    Lay out every sequence of the store as one horizontal subplot.

    Sequences are visited in reverse store order, so the first sequence of the store
    ends up in the bottom band. Each row is scaled against [0, largest end on its
    sequence] and jittered vertically with rng (any object with uniform(a, b)).
    """
    config = config or LayoutConfig()
    rng = rng or random.Random()
    svg = []
    for el, (seqid, rows) in enumerate(reversed(store.items()), start=1):
        data_max = store.max_end(seqid)
        logger.debug(f'Laying out {seqid}: {len(rows)} feature(s) over {format_bp_pretty(data_max)} bp in band {el}.')
        svg.extend(generate_subplot(el, seqid, rows, data_max, config, rng))
    return '\n'.join(svg)
