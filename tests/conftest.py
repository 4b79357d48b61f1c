"""
Configuration for pytest tests.
"""

import pytest
import requests
from unittest.mock import patch

from fastapi.testclient import TestClient

from studytube.api.app import create_app
from studytube.config import Config, LLMDisabled
from studytube.db.database import SessionLocal, init_db


@pytest.fixture
def config(tmp_path):
    """Configuration with a throwaway SQLite database and no LLM."""
    return Config(
        environment="test",
        database_url=f"sqlite:///{tmp_path}/studytube_test.db",
        http_timeout=1.0,
        llm=LLMDisabled(reason="disabled for tests"),
    )


@pytest.fixture
def db_session(config):
    """A session bound to a freshly created test database."""
    init_db(config.database_url)
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client(config):
    """A TestClient for an app built from the test configuration."""
    app = create_app(config)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def offline():
    """Make every outbound request fail as if the network were down."""
    error = requests.ConnectionError("network is offline")
    with patch("requests.get", side_effect=error) as mock_get, \
            patch("studytube.core.transcript.YouTubeTranscriptApi") as mock_api:
        mock_api.return_value.fetch.side_effect = error
        yield mock_get


@pytest.fixture
def dom_transcript():
    """A realistic transcript about DOM manipulation."""
    return (
        "In this lesson we look at the DOM. Every element on the page can be selected with "
        "querySelector or getElementById. Once you have an element you can change its "
        "textContent or innerHTML, set an attribute, or attach an event with addEventListener. "
        "The callback function receives the event object. We store the element in a const "
        "variable so we can reuse it later in the loop."
    )
