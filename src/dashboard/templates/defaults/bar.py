"""Default styles for bar charts.

Used by the best-day and revenue split charts. Vertical bars put the
category on x; horizontal bars put it on y, so the hover text swaps axes.

Usage:
    from src.dashboard.templates.defaults import create_bar_defaults

    fig = go.Figure(template=create_bar_defaults('dark', value_format=',.0f'))
    fig.add_bar(x=days, y=avg_views)
"""

import plotly.graph_objects as go
from src.dashboard.utils.style_config import COLORS
from src.dashboard.templates.base import create_base_template

def create_bar_defaults(theme='dark', value_format=',.2f', horizontal=False):
    """Create template with bar chart defaults.

    Args:
        theme: 'dark' or 'light'
        value_format: d3 format for the bar value in hover text
        horizontal: Category on the y axis

    Returns:
        go.layout.Template: Template with accent-colored bars and no legend
    """
    template = create_base_template(theme)
    category, value = ('y', 'x') if horizontal else ('x', 'y')

    template.data.bar = [
        go.Bar(
            marker_color=COLORS['accent'],
            orientation='h' if horizontal else 'v',
            hovertemplate=f"%{{{category}}}: %{{{value}:{value_format}}}<extra></extra>",
            showlegend=False
        )
    ]
    template.layout.bargap = 0.3

    return template
