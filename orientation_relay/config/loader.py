"""YAML loader for the config subsystem.

``config/relay.yml`` is consumed here, validated via models.py and returned
as a typed :class:`AppConfig`. Root-level keys map one-to-one onto the model
sections (``relay``, ``source``, ``telemetry``), so new sections only require
extending the model.
"""
from __future__ import annotations

from pathlib import Path
from typing import Mapping

import yaml

from .models import AppConfig

DEFAULT_CONFIG_PATH = Path("config") / "relay.yml"


def _read_yaml(path: Path) -> Mapping:
    """Read a YAML file and return a mapping (empty dict if file is blank)."""

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with path.open("r", encoding="utf-8") as fp:
        try:
            data = yaml.safe_load(fp) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Malformed YAML in {path}: {exc}") from exc
    if not isinstance(data, Mapping):
        raise ValueError(f"YAML root must be a mapping in {path}")
    return data


def load_relay_config(path: Path | str = DEFAULT_CONFIG_PATH) -> AppConfig:
    """Load relay.yml (relay lifecycle, source filter, telemetry)."""

    data = _read_yaml(Path(path))
    return AppConfig.model_validate(data)
