"""
Settings and credential source.

The JWT comes from SE_JWT_TOKEN, falling back to ~/.tipfax/config.json.
An empty token means "not configured".
"""

import json
import os
from pathlib import Path
from typing import Any, Mapping, Optional

from pydantic import BaseModel

from tipfax.models.events import ASTRO_URL

CONFIG_FILE = Path.home() / ".tipfax" / "config.json"

ENV_TOKEN = "SE_JWT_TOKEN"
ENV_URL = "TIPFAX_ASTRO_URL"


class Settings(BaseModel):
    se_jwt_token: str = ""
    astro_url: str = ASTRO_URL
    print_receipts: bool = True


def _load_file(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text())
    except (FileNotFoundError, json.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def load_settings(path: Optional[Path] = None, environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Merge the config file with the environment; the environment wins."""
    env = os.environ if environ is None else environ
    values = _load_file(path or CONFIG_FILE)
    if env.get(ENV_TOKEN):
        values["se_jwt_token"] = env[ENV_TOKEN]
    if env.get(ENV_URL):
        values["astro_url"] = env[ENV_URL]
    return Settings.model_validate(values)


def save_settings(settings: Settings, path: Optional[Path] = None) -> None:
    target = path or CONFIG_FILE
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(json.dumps(settings.model_dump(), indent=2))
