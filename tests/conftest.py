"""Shared fixtures for the dashboard tests."""
from datetime import datetime, timedelta

import pytest

from src.data_processing.content.models import ContentItem


@pytest.fixture
def make_item():
    """Factory for ContentItems with sensible defaults."""
    def _make(identity, views=0, day=0, source='senbo', **kwargs):
        defaults = dict(
            identity=identity,
            title=kwargs.pop('title', f"Video {identity}"),
            url=kwargs.pop('url', f"https://youtube.com/shorts/{identity}"),
            source=source,
            published_at=kwargs.pop('published_at', datetime(2024, 1, 1) + timedelta(days=day)),
            primary_metric=float(views),
        )
        defaults.update(kwargs)
        return ContentItem(**defaults)
    return _make


@pytest.fixture
def daily_items(make_item):
    """Build items published on consecutive days from a list of view counts."""
    def _build(views):
        return [make_item(f"v{i}", views=v, day=i) for i, v in enumerate(views)]
    return _build


class FakeSessionState(dict):
    """Stand-in for st.session_state outside a Streamlit run."""

    def __getattr__(self, key):
        try:
            return self[key]
        except KeyError:
            raise AttributeError(key)

    def __setattr__(self, key, value):
        self[key] = value


@pytest.fixture
def new_session(monkeypatch):
    """Install a fresh browser session's state; call again for another visitor."""
    import streamlit as st

    def _open():
        state = FakeSessionState()
        monkeypatch.setattr(st, 'session_state', state)
        return state
    return _open
