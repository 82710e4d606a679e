"""Per-user configuration loader (~/.binfetch.yaml)."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigError

CONFIG_ENV = "BINFETCH_CONFIG"
CONFIG_FILENAME = ".binfetch.yaml"

_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")


class BinfetchConfig(BaseModel):
    s3_region: str = Field(..., alias="S3Region", min_length=1)
    s3_bucket: str = Field(..., alias="S3Bucket", min_length=1)
    s3_endpoint_url: Optional[str] = Field(None, alias="S3EndpointUrl")

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


def default_config_path() -> Path:
    override = (os.getenv(CONFIG_ENV) or "").strip()
    if override:
        return Path(override)
    return Path.home() / CONFIG_FILENAME


def _expand_str(value: str) -> str:
    """Substitute ``${VAR}`` and ``${VAR:-default}`` from the environment."""

    def replacer(match: re.Match[str]) -> str:
        token = match.group(1)
        if ":-" in token:
            key, default = token.split(":-", 1)
            actual = os.getenv(key, "")
            return actual if actual.strip() else default
        actual = os.getenv(token, "")
        if not actual.strip():
            raise ConfigError(f"missing environment variable: {token}")
        return actual

    return _VAR_PATTERN.sub(replacer, value)


def _expand_payload(value: Any) -> Any:
    if isinstance(value, str):
        return _expand_str(value)
    if isinstance(value, list):
        return [_expand_payload(item) for item in value]
    if isinstance(value, dict):
        return {str(key): _expand_payload(item) for key, item in value.items()}
    return value


def load_config(path: Path | None = None) -> BinfetchConfig:
    path = path or default_config_path()
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot read config {path}: {exc}") from exc
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"config {path} must be a mapping")
    try:
        return BinfetchConfig(**_expand_payload(data))
    except ValidationError as exc:
        raise ConfigError(f"invalid config {path}: {exc}") from exc
