"""Settings loading."""

import json

from tipfax.config import Settings, load_settings, save_settings
from tipfax.models.events import ASTRO_URL


def test_defaults_when_nothing_configured(tmp_path):
    settings = load_settings(tmp_path / "missing.json", environ={})
    assert settings == Settings()
    assert settings.se_jwt_token == ""
    assert settings.astro_url == ASTRO_URL


def test_environment_overrides_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"se_jwt_token": "from-file", "print_receipts": False}))

    settings = load_settings(path, environ={"SE_JWT_TOKEN": "from-env", "TIPFAX_ASTRO_URL": "ws://localhost:9000/"})

    assert settings.se_jwt_token == "from-env"
    assert settings.astro_url == "ws://localhost:9000/"
    assert settings.print_receipts is False


def test_empty_env_token_falls_back_to_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"se_jwt_token": "from-file"}))
    assert load_settings(path, environ={"SE_JWT_TOKEN": ""}).se_jwt_token == "from-file"


def test_corrupt_file_is_ignored(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    assert load_settings(path, environ={}) == Settings()


def test_save_creates_parent_dir(tmp_path):
    path = tmp_path / "nested" / "config.json"
    save_settings(Settings(se_jwt_token="abc"), path)
    assert load_settings(path, environ={}).se_jwt_token == "abc"
