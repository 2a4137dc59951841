import json

import pytest

from gooddogs import create_app
from gooddogs import config


@pytest.fixture
def votes_path(tmp_path):
    """Путь к журналу голосов для одного теста"""
    return tmp_path / "logs" / "votes.log"


@pytest.fixture
def app(votes_path):
    return create_app(config.TestingConfig, VOTES_LOG=str(votes_path))


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def read_votes(votes_path):
    """Прочитать журнал: список разобранных JSON-строк"""
    def _read():
        if not votes_path.exists():
            return []
        with open(votes_path, encoding="utf-8") as f:
            return [json.loads(line) for line in f]
    return _read
