# gffplot/utils/scale_utils.py
from ..errors import DegenerateRangeError

def scale(x, data_min, data_max, viz_min, viz_max):
    """Map x from [data_min, data_max] onto [viz_min, viz_max]. Values outside the data range are not clamped."""
    if data_max == data_min: raise DegenerateRangeError(data_min, data_max)
    return (viz_max - viz_min) * ((x - data_min) / (data_max - data_min)) + viz_min

def format_bp_pretty(n):
    digits = str(abs(int(n)))
    groups = [digits[max(i - 3, 0):i] for i in range(len(digits), 0, -3)]
    return ('-' if n < 0 else '') + ','.join(reversed(groups))

def format_axis_label(x): return f'{int(round(x))} bp'
