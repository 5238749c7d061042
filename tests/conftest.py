import os
import tempfile

# Isolated data dir BEFORE importing settings so get_settings() never touches ./data
os.environ.setdefault("DATA_DIR", tempfile.mkdtemp(prefix="cashdesk_test_"))

import pytest
from fastapi.testclient import TestClient

from cashdesk.core.config import Settings
from cashdesk.main import create_app
from cashdesk.models.user import SeedUser

FAST_ROUNDS = 4


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "test.sqlite3"


@pytest.fixture
def seed_config():
    return [
        SeedUser(username="admin", password="admin-pass-123", role="admin"),
        SeedUser(username="tester", password="tester-pass-123", role="user"),
    ]


@pytest.fixture
def settings(tmp_path, seed_config):
    s = Settings(
        data_dir=tmp_path,
        db_filename="test.sqlite3",
        seed_users=seed_config,
        password_hash_rounds=FAST_ROUNDS,
    )
    s.init_post_load()
    return s


@pytest.fixture
def client(settings):
    app = create_app(settings_override=settings)
    return TestClient(app, raise_server_exceptions=False)
