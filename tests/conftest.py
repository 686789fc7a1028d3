import pytest

from hydrogen_backup.data.config_loader import ENV_KEYS

from .helpers.fakes import FakeRunner


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # setenv first so monkeypatch also removes anything load_dotenv adds later
    for key in [*ENV_KEYS.values(), "HYDROGENBACKUP_LOG_LEVEL"]:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def fake_runner():
    return FakeRunner()
