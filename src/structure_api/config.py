"""Configuration management for Structure API."""

import json
import logging
import os
from collections.abc import Callable
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


@dataclass
class WarehouseConfig:
    """Driver-level settings applied to every Snowflake connection."""

    login_timeout: int | None = None  # None means use the driver default
    application: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "WarehouseConfig":
        """Create WarehouseConfig from dictionary."""
        return cls(**{k: v for k, v in data.items() if k in cls.__annotations__})


@dataclass
class StructureConfig:
    """Main configuration for Structure API."""

    # Server settings
    server_host: str = "localhost"
    server_port: int = 8080
    api_prefix: str = "/snowflake"
    cors_origins: list[str] = field(default_factory=lambda: ["*"])

    # Preview settings
    preview_row_limit: int = 100

    # Warehouse driver settings
    warehouse: WarehouseConfig = field(default_factory=WarehouseConfig)

    debug: bool = False

    @classmethod
    def load(cls) -> "StructureConfig":
        """Load configuration from various sources."""
        config = cls()

        # 1. Load from config file if exists
        config_paths = [Path.home() / ".structure" / "config.json", Path.cwd() / ".structure.json", Path.cwd() / "structure.config.json"]

        for config_path in config_paths:
            if config_path.exists():
                try:
                    with open(config_path) as f:
                        data = json.load(f)
                    config = cls._merge_config(config, data)
                    break
                except (OSError, json.JSONDecodeError) as e:
                    logger.warning(f"Ignoring unreadable config file {config_path}: {e}")

        # 2. Override with environment variables
        env_mappings: dict[str, str | tuple[str, Callable[[str], Any]]] = {
            "STRUCTURE_SERVER_HOST": "server_host",
            "STRUCTURE_SERVER_PORT": ("server_port", int),
            "STRUCTURE_API_PREFIX": "api_prefix",
            "STRUCTURE_CORS_ORIGINS": ("cors_origins", lambda x: [origin.strip() for origin in x.split(",") if origin.strip()]),
            "STRUCTURE_PREVIEW_ROW_LIMIT": ("preview_row_limit", int),
            "STRUCTURE_DEBUG": ("debug", lambda x: x.lower() in ("true", "1", "yes")),
            "STRUCTURE_LOGIN_TIMEOUT": ("warehouse.login_timeout", int),
            "STRUCTURE_APPLICATION": "warehouse.application",
        }

        for env_var, config_mapping in env_mappings.items():
            value = os.environ.get(env_var)
            if value is not None:
                if isinstance(config_mapping, tuple):
                    path, converter = config_mapping
                    config = cls._set_nested(config, path, converter(value))
                else:
                    config = cls._set_nested(config, config_mapping, value)

        return config

    @classmethod
    def _merge_config(cls, config: "StructureConfig", data: dict[str, Any]) -> "StructureConfig":
        """Merge configuration data into config object."""
        if "warehouse" in data and isinstance(data["warehouse"], dict):
            config.warehouse = WarehouseConfig.from_dict(data["warehouse"])
            data = {k: v for k, v in data.items() if k != "warehouse"}

        for key, value in data.items():
            if hasattr(config, key):
                setattr(config, key, value)

        return config

    @classmethod
    def _set_nested(cls, config: "StructureConfig", path: str, value: Any) -> "StructureConfig":
        """Set a nested attribute using dot notation."""
        parts = path.split(".")
        obj = config
        for part in parts[:-1]:
            obj = getattr(obj, part)
        setattr(obj, parts[-1], value)
        return config

    def save(self, path: Path | None = None) -> None:
        """Save configuration to file."""
        if path is None:
            config_dir = Path.home() / ".structure"
            config_dir.mkdir(exist_ok=True)
            path = config_dir / "config.json"

        with open(path, "w") as f:
            json.dump(asdict(self), f, indent=2)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        return asdict(self)


# Global config instance
_config: StructureConfig | None = None


def get_config() -> StructureConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = StructureConfig.load()
    return _config


def reload_config() -> StructureConfig:
    """Reload configuration from sources."""
    global _config
    _config = StructureConfig.load()
    return _config
