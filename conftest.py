"""
Shared pytest fixtures
"""
import sys
import os

import pytest

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))


@pytest.fixture
def documents_dir(tmp_path, monkeypatch):
    """Point the app's private documents directory at a temp folder"""
    path = tmp_path / "Documents"
    monkeypatch.setenv("BUCKETLIST_DOCUMENTS_DIR", str(path))
    return path


@pytest.fixture
def session_state():
    """Plain dict standing in for st.session_state"""
    return {}
