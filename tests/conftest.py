"""
Shared fixtures for conjugador tests.
"""

import pytest

from conjugador.db.connection import MEMORY, dispose_engines, get_session


@pytest.fixture
def db_session():
    """Session on a fresh in-memory paradigm store."""
    session = get_session(MEMORY)
    yield session
    session.close()
    dispose_engines()
