# tests/conftest.py
import os
import sys

import pytest

# Set environment variable to disable Streamlit caching in tests
os.environ["STREAMLIT_CACHE_DISABLED"] = "1"


# Patch Streamlit caching BEFORE any imports that use it
def passthrough_decorator(func=None, **kwargs):
    """A decorator that does nothing but return the original function."""
    if func is None:

        def wrapper(fn):
            return fn

        return wrapper
    return func


import streamlit as st

st.cache_data = passthrough_decorator
st.cache_resource = passthrough_decorator

# Make sure `src/` is on the import path
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
sys.path.insert(0, os.path.join(ROOT, "src"))

from fixtures.content_fixtures import FakeContentAPI, fake_api, mock_logger  # noqa: E402,F401


class MockSessionState(dict):
    """Dict with attribute access, like ``st.session_state``."""

    def __getattr__(self, key):
        try:
            return self[key]
        except KeyError:
            raise AttributeError(key)

    def __setattr__(self, key, value):
        self[key] = value

    def __delattr__(self, key):
        del self[key]


@pytest.fixture
def session_state(monkeypatch):
    """Fresh session state patched into streamlit."""
    state = MockSessionState()
    monkeypatch.setattr(st, "session_state", state, raising=False)
    return state


@pytest.fixture(autouse=True)
def content_api_env(monkeypatch):
    """Every test sees a configured backend and no timeout/retry overrides."""
    monkeypatch.setenv("CONTENT_API_BASE_URL", "https://backend.test")
    monkeypatch.delenv("CONTENT_API_TIMEOUT", raising=False)
    monkeypatch.delenv("CONTENT_API_READ_MAX_TRIES", raising=False)
