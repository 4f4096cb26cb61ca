"""Base template with common styles from style_config.

IMPORTANT: Templates are for STYLING only (colors, fonts, markers, etc).

This module provides the base template that all other templates build upon.
It reads from style_config.py so every chart follows the active theme.

Usage:
    from src.dashboard.templates.base import create_base_template

    fig = go.Figure(template=create_base_template('dark'))
"""

import plotly.graph_objects as go
from src.dashboard.utils.style_config import COLORS, FONTS, DIMENSIONS, theme_colors

def create_base_template(theme='dark'):
    """Create base template with common styles.

    Args:
        theme: 'dark' or 'light'

    Returns:
        go.layout.Template: Base template with:
        - Font family and sizes
        - Theme background and text colors
        - Margins and spacing
        - Hover defaults
    """
    colors = theme_colors(theme)
    grid_color = 'rgba(255,255,255,0.08)' if theme == 'dark' else 'rgba(0,0,0,0.1)'
    template = go.layout.Template()

    template.layout = dict(
        font=dict(
            family=FONTS['primary']['family'],
            size=FONTS['primary']['sizes']['body'],
            color=colors['text']['primary']
        ),

        # Transparent so the page background shows through
        paper_bgcolor='rgba(0,0,0,0)',
        plot_bgcolor='rgba(0,0,0,0)',

        margin=DIMENSIONS['dashboard']['margin'],
        height=DIMENSIONS['dashboard']['height'],

        showlegend=True,
        legend=dict(
            yanchor="top",
            y=0.99,
            xanchor="right",
            x=0.99,
            bgcolor='rgba(0,0,0,0)'
        ),

        hovermode='closest',
        hoverlabel=dict(
            font=dict(
                family=FONTS['primary']['family'],
                size=FONTS['primary']['sizes']['small']
            ),
            bordercolor=COLORS['accent']
        ),

        xaxis=dict(
            showgrid=False,
            zeroline=False,
            showline=True,
            linecolor=grid_color
        ),
        yaxis=dict(
            showgrid=True,
            gridcolor=grid_color,
            zeroline=False,
            showline=False
        )
    )

    return template
