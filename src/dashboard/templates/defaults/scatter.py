"""Default template for line charts.

This module provides the default template for the revenue timeline:
- Revenue color for lines and markers
- Hover text with date and amount
"""

import plotly.graph_objects as go
from src.dashboard.utils.style_config import COLORS
from src.dashboard.templates.base import create_base_template

def create_scatter_defaults(theme='dark'):
    """Create default scatter template.

    Args:
        theme: 'dark' or 'light'

    Returns:
        go.layout.Template: Template with scatter defaults:
        - Marker and line styling
        - Hover template
    """
    template = create_base_template(theme)

    template.data.scatter = [
        go.Scatter(
            mode="lines+markers",
            marker=dict(
                color=COLORS['revenue'],
                size=5
            ),
            line=dict(
                color=COLORS['revenue'],
                width=2
            ),
            hovertemplate=(
                "%{x|%d %b}<br>" +
                "$%{y:,.2f}<br>" +
                "<extra></extra>"  # Hide secondary box
            )
        )
    ]

    template.layout.update(
        margin=dict(l=50, r=20, t=30, b=40),
        showlegend=False
    )

    return template
