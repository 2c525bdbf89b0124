"""Root fixtures: keep a developer's local .env out of every test run."""

import pytest
import pydantic_settings.sources.providers.dotenv as settings_dotenv


@pytest.fixture(autouse=True)
def ignore_dotenv_file(monkeypatch):
    monkeypatch.setattr(settings_dotenv, "dotenv_values", lambda *args, **kwargs: {})
