# gffplot/visualization.py
import html
from .layout import LayoutConfig, generate_plot_annotations
from .normalizer import Source

MARKER_TEMPLATE = """<marker id='{marker_id}' viewBox='0 0 10 10' refX='1' refY='5' markerUnits='strokeWidth' markerWidth='3' markerHeight='3' orient='auto'>
    <path d='M 0 0 L 10 5 L 0 10 z' fill='{color}'/>
</marker>"""

PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
    <meta charset='UTF-8'>
    <title>{title}</title>
    <style type='text/css'>
        #tooltip {{
            background: cornsilk;
            border: 1px solid black;
            border-radius: 5px;
            padding: 5px;
        }}
    </style>
</head>
<body>
<div id='tooltip' style='position: absolute; display: none;'></div>
{svg}
<script>
    function showTooltip(evt, text) {{
        let tooltip = document.getElementById('tooltip');
        tooltip.innerHTML = text;
        tooltip.style.fontFamily = 'monospace';
        tooltip.style.display = 'block';
        tooltip.style.left = evt.pageX + 10 + 'px';
        tooltip.style.top = evt.pageY + 10 + 'px';
    }}

    function hideTooltip() {{
        let tooltip = document.getElementById('tooltip');
        tooltip.style.display = 'none';
    }}

    function addTextOnClick(evt, text) {{
        let svg = evt.target.ownerSVGElement;
        let point = svg.createSVGPoint();
        point.x = evt.clientX;
        point.y = evt.clientY;
        let local = point.matrixTransform(svg.getScreenCTM().inverse());
        let label = document.createElementNS('http://www.w3.org/2000/svg', 'text');
        label.setAttribute('x', local.x);
        label.setAttribute('y', local.y - 8);
        label.setAttribute('font-family', 'monospace');
        label.setAttribute('font-size', '10');
        label.textContent = text.split('\\n')[0];
        document.getElementById('textGroup').appendChild(label);
    }}
</script>
</body>
</html>
"""


def make_svg(body, n_sequences, config):
    """Wrap subplot markup in an <svg> root with one arrowhead marker per annotation source."""
    height = config.subplot_height * n_sequences
    svg = [f"<svg width='{config.width}' height='{height}' xmlns='http://www.w3.org/2000/svg'>", '<defs>']
    svg.extend(MARKER_TEMPLATE.format(marker_id=s.marker_id, color=config.color_for(s)) for s in Source)
    svg.append('</defs>')
    svg.append(body)
    svg.append("<g id='textGroup'></g>")
    svg.append('</svg>')
    return '\n'.join(svg)


def make_html(svg, title='Annotated Mito'):
    return PAGE_TEMPLATE.format(title=html.escape(title), svg=svg)


def render_document(store, config=None, rng=None):
    config = config or LayoutConfig()
    body = generate_plot_annotations(store, config, rng)
    return make_html(make_svg(body, len(store), config), config.title)
