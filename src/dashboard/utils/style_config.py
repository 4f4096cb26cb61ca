"""Style configuration for the dashboard."""

import streamlit as st

THEMES = {
    'dark': {
        'text': {
            'primary': 'rgb(240, 240, 245)',
            'secondary': 'rgb(150, 150, 165)'
        },
        'background': '#0E1117',
        'card': '#161B22',
        'border': 'rgba(255, 255, 255, 0.08)',
    },
    'light': {
        'text': {
            'primary': 'rgb(49, 51, 63)',
            'secondary': 'rgb(120, 120, 120)'
        },
        'background': '#FFFFFF',
        'card': '#FFFFFF',
        'border': '#EEEEEE',
    },
}

COLORS = {
    'text': THEMES['light']['text'],
    'background': THEMES['light']['background'],
    'accent': 'rgb(99, 102, 241)',       # Indigo
    'revenue': 'rgb(52, 211, 153)',      # Emerald
    'outlier': 'rgb(234, 179, 8)',       # Yellow badge
    'sources': {
        'senbo': 'rgb(99, 102, 241)',
        'senne': 'rgb(249, 115, 22)',    # Orange
        'reel': 'rgb(239, 68, 68)',
    },
    'creators': {
        'bowie': 'rgb(99, 102, 241)',
        'senne': 'rgb(249, 115, 22)',
    }
}

FONTS = {
    'primary': {
        'family': 'Source Sans Pro',
        'sizes': {
            'title': 20,
            'header': 16,
            'body': 14,
            'small': 12
        }
    }
}

CHART_DEFAULTS = {
    'margin': {
        'plot': dict(t=30, b=20),
        'section': dict(t=20, b=20)
    }
}

DIMENSIONS = {
    'dashboard': {
        'width': None,  # Use container width
        'height': 400,
        'margin': CHART_DEFAULTS['margin']['plot']
    }
}

SOURCE_LABELS = {
    'senbo': 'S&B',
    'senne': 'Senne',
    'reel': 'Reel',
}


def theme_colors(theme: str) -> dict:
    """Colors for ``dark`` or ``light``, falling back to dark."""
    return THEMES.get(theme, THEMES['dark'])


def render_section_header(title):
    """Render an uppercase section header in the accent color."""
    st.markdown(
        f'<p style="font-family: {FONTS["primary"]["family"]}; font-size: {FONTS["primary"]["sizes"]["header"]}px; '
        f'text-transform: uppercase; font-weight: 600; letter-spacing: 0.1em; color: {COLORS["accent"]}; margin-bottom: 1em;">'
        f'{title}</p>',
        unsafe_allow_html=True
    )


def render_metric_card(title, value, subtitle=None, theme='dark'):
    """Render a metric card with a title, value, and optional subtitle.

    Args:
        title: Title of the metric
        value: Value to display
        subtitle: Optional subtitle
        theme: 'dark' or 'light'
    """
    colors = theme_colors(theme)
    st.markdown(
        f"""
        <div style="padding: 10px; border-radius: 5px; border: 1px solid {colors['border']}; background-color: {colors['card']};">
            <h4 style="margin: 0; color: {colors['text']['secondary']}; font-size: 12px; text-transform: uppercase; letter-spacing: 0.2em;">{title}</h4>
            <div style="font-size: 28px; font-weight: 300; color: {colors['text']['primary']};">{value}</div>
            {f'<div style="font-size: 12px; color: {colors["text"]["secondary"]};">{subtitle}</div>' if subtitle else ''}
        </div>
        """,
        unsafe_allow_html=True
    )


def apply_theme(theme):
    """Inject page background and text colors for the chosen theme."""
    colors = theme_colors(theme)
    st.markdown(
        f"""
        <style>
        .stApp {{ background-color: {colors['background']}; color: {colors['text']['primary']}; }}
        </style>
        """,
        unsafe_allow_html=True
    )
