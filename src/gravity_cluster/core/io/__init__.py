from .config_io import (
    CONFIG_SCHEMA_VERSION,
    config_from_dict,
    config_to_dict,
    deserialize_config,
    load_config,
    save_config,
    serialize_config,
)

__all__ = [
    "CONFIG_SCHEMA_VERSION",
    "config_from_dict",
    "config_to_dict",
    "deserialize_config",
    "load_config",
    "save_config",
    "serialize_config",
]
