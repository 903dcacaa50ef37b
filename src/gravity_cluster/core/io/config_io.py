from __future__ import annotations

import dataclasses
import json
import logging
from pathlib import Path
from typing import Any, Dict

from ..config import PairwisePolicy, SimulationConfig

_LOG = logging.getLogger(__name__)

CONFIG_SCHEMA_VERSION = 1

_FIELDS = {field.name for field in dataclasses.fields(SimulationConfig)}


def config_to_dict(config: SimulationConfig) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"schema_version": CONFIG_SCHEMA_VERSION}
    for name in sorted(_FIELDS):
        value = getattr(config, name)
        if isinstance(value, PairwisePolicy):
            value = value.value
        elif isinstance(value, tuple):
            value = list(value)
        payload[name] = value
    return payload


def config_from_dict(payload: Dict[str, Any]) -> SimulationConfig:
    version = int(payload.get("schema_version", 0))
    if version != CONFIG_SCHEMA_VERSION:
        raise ValueError(f"Unsupported config schema version: {version}")
    unknown = set(payload) - _FIELDS - {"schema_version"}
    if unknown:
        raise ValueError(f"Unknown config fields: {', '.join(sorted(unknown))}")
    values = {name: payload[name] for name in _FIELDS if name in payload}
    if "central_center" in values:
        values["central_center"] = tuple(values["central_center"])
    if "radius_range" in values:
        values["radius_range"] = tuple(values["radius_range"])
    return SimulationConfig(**values)


def serialize_config(config: SimulationConfig) -> str:
    return json.dumps(config_to_dict(config), indent=2)


def deserialize_config(payload: str) -> SimulationConfig:
    return config_from_dict(json.loads(payload))


def load_config(path: Path) -> SimulationConfig:
    config = deserialize_config(Path(path).read_text(encoding="utf-8"))
    _LOG.debug("Loaded simulation config from %s", path)
    return config


def save_config(config: SimulationConfig, path: Path) -> None:
    Path(path).write_text(serialize_config(config), encoding="utf-8")
