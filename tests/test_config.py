import json
from pathlib import Path

import pytest

from procon_gardener.config import GlobalConfig, ServiceConfig, config_path, init_config
from procon_gardener.errors import ConfigError


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setattr(Path, "home", lambda: tmp_path)
    # Path.expanduser reads the environment, not Path.home
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    return tmp_path


def test_config_path_under_home(home):
    assert config_path() == home / ".procon-gardener" / "config.json"


def test_init_creates_empty_config(home):
    path = init_config()

    assert json.loads(path.read_text(encoding="utf-8")) == {
        "atcoder": {"repository_path": "", "user_id": "", "user_email": ""}
    }


def test_init_keeps_existing_config_unless_forced(home):
    path = init_config()
    GlobalConfig(atcoder=ServiceConfig("/archive", "tourist", "t@example.com")).save(path)

    init_config(force=False)
    assert GlobalConfig.load(path).atcoder.user_id == "tourist"

    init_config(force=True)
    assert GlobalConfig.load(path).atcoder.user_id == ""


def test_load_reads_saved_values(tmp_path):
    path = tmp_path / "config.json"
    GlobalConfig(atcoder=ServiceConfig("~/atcoder", "tourist", "t@example.com")).save(path)

    service = GlobalConfig.load(path).atcoder

    assert service == ServiceConfig("~/atcoder", "tourist", "t@example.com")


def test_load_fills_missing_keys(tmp_path):
    path = tmp_path / "config.json"
    path.write_text('{"atcoder": {"user_id": "tourist"}}', encoding="utf-8")

    service = GlobalConfig.load(path).atcoder

    assert service.user_id == "tourist"
    assert service.repository_path == ""


def test_load_missing_file(tmp_path):
    with pytest.raises(ConfigError) as excinfo:
        GlobalConfig.load(tmp_path / "nope.json")
    assert "nope.json" in str(excinfo.value)


@pytest.mark.parametrize("content", ["{not json", "[]", '{"atcoder": "tourist"}'])
def test_load_malformed_file(tmp_path, content):
    path = tmp_path / "config.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError):
        GlobalConfig.load(path)


@pytest.mark.parametrize("field", ["repository_path", "user_id", "user_email"])
@pytest.mark.parametrize("value", [None, 42, ["tourist"]])
def test_load_rejects_non_string_values(tmp_path, field, value):
    path = tmp_path / "config.json"
    service = {"repository_path": "/archive", "user_id": "tourist", "user_email": ""}
    service[field] = value
    path.write_text(json.dumps({"atcoder": service}), encoding="utf-8")

    with pytest.raises(ConfigError, match=field):
        GlobalConfig.load(path)


def test_validate_requires_user_and_repository():
    with pytest.raises(ConfigError, match="repository_path, user_id"):
        ServiceConfig().validate(Path("config.json"))

    ServiceConfig(repository_path="/archive", user_id="tourist").validate()


def test_repository_expands_home(home):
    assert ServiceConfig(repository_path="~/atcoder").repository == home / "atcoder"
