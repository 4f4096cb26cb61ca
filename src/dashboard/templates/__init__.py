"""Plotly templates for the dashboard charts.

base.py holds the theme-aware layout shared by every chart; defaults/ adds
per-trace styling on top of it. Pass the active theme ('dark' or 'light')
so charts match the page.
"""
