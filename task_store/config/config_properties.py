"""
Configuration Properties - single source of truth for the server configuration.

Reads config.properties and provides access to every setting. Environment
variables (TASK_STORE_*) override values from the file, so the same build can
be reconfigured in a container without editing files.
"""

import os
from pathlib import Path
from typing import Optional, Dict, Any, List

from task_store.utils.exceptions import ConfigurationError


# Dot-notation key -> (environment override, default)
SETTINGS: Dict[str, tuple] = {
    "server.host":            ("TASK_STORE_HOST", "0.0.0.0"),
    "server.port":            ("TASK_STORE_PORT", "3000"),
    "cors.allow_origins":     ("TASK_STORE_CORS_ORIGINS", "*"),
    "store.seed_enabled":     ("TASK_STORE_SEED_ENABLED", "true"),
    "logging.folder":         ("TASK_STORE_LOG_FOLDER", "./logs"),
    "logging.level":          ("TASK_STORE_LOG_LEVEL", "INFO"),
    "logging.enable_console": ("TASK_STORE_ENABLE_CONSOLE_LOGGING", "true"),
    "logging.enable_file":    ("TASK_STORE_ENABLE_FILE_LOGGING", "false"),
    "logging.max_bytes":      ("TASK_STORE_LOG_MAX_BYTES", "10485760"),
    "logging.backup_count":   ("TASK_STORE_LOG_BACKUP_COUNT", "5"),
}

_TRUE_VALUES = ("true", "1", "yes", "on")


class ConfigProperties:
    """
    Unified configuration loader and accessor.

    Reads config.properties once at startup and resolves every known
    setting in this order: environment variable, file value, default.

    Quick usage::

        ConfigProperties.load()
        ConfigProperties.get("server.host")
        ConfigProperties.get_int("server.port", 3000)
        ConfigProperties.get_logging_config()
    """

    _instance: Optional["ConfigProperties"] = None
    _properties: Dict[str, str] = {}
    _loaded: bool = False

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    @classmethod
    def load(cls, path: Optional[str] = None) -> "ConfigProperties":
        """
        Parse config.properties and return the singleton instance.

        Args:
            path: Explicit path to config.properties; auto-discovered if omitted.
        """
        if cls._instance and cls._loaded:
            return cls._instance

        cls._instance = cls()
        cls._properties = {}

        config_path = Path(path) if path else cls._find_config_file()

        if config_path and config_path.exists():
            cls._parse_file(config_path)

        cls._loaded = True
        return cls._instance

    @classmethod
    def reload(cls, path: Optional[str] = None) -> "ConfigProperties":
        """Force a fresh re-parse of config.properties."""
        cls._loaded = False
        cls._properties = {}
        cls._instance = None
        return cls.load(path)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @classmethod
    def get(cls, key: str, default: Optional[str] = None) -> Optional[str]:
        """
        Return the value for *key*.

        Known settings honour their TASK_STORE_* environment override and
        fall back to their built-in default; other keys come from the file only.
        """
        if not cls._loaded:
            cls.load()

        env_key, builtin_default = SETTINGS.get(key, (None, None))
        if env_key:
            env_value = os.getenv(env_key)
            if env_value is not None:
                return env_value

        value = cls._properties.get(key)
        if value is not None:
            return value
        return default if default is not None else builtin_default

    @classmethod
    def get_bool(cls, key: str, default: bool = False) -> bool:
        """Return a boolean value."""
        val = cls.get(key)
        if val is None:
            return default
        return val.strip().lower() in _TRUE_VALUES

    @classmethod
    def get_int(cls, key: str, default: int = 0) -> int:
        """Return an integer value."""
        val = cls.get(key)
        if val is None:
            return default
        try:
            return int(val)
        except ValueError:
            return default

    @classmethod
    def get_list(cls, key: str, default: Optional[List[str]] = None) -> List[str]:
        """Return a comma-separated value as a list of stripped items."""
        val = cls.get(key)
        if not val:
            return list(default or [])
        return [item.strip() for item in val.split(",") if item.strip()]

    @classmethod
    def get_section(cls, prefix: str) -> Dict[str, str]:
        """Return all file keys/values under dot-notation *prefix* as a flat dict."""
        if not cls._loaded:
            cls.load()
        prefix_dot = prefix if prefix.endswith(".") else prefix + "."
        return {
            key[len(prefix_dot):]: val
            for key, val in cls._properties.items()
            if key.startswith(prefix_dot)
        }

    @classmethod
    def all_properties(cls) -> Dict[str, str]:
        """Return a copy of every property read from the file."""
        if not cls._loaded:
            cls.load()
        return dict(cls._properties)

    # ------------------------------------------------------------------
    # Typed settings
    # ------------------------------------------------------------------

    @classmethod
    def get_server_host(cls) -> str:
        return cls.get("server.host")

    @classmethod
    def get_server_port(cls) -> int:
        """
        Return the TCP port to bind.

        Raises:
            ConfigurationError: If the value is not an integer in 1..65535.
        """
        raw = cls.get("server.port")
        try:
            port = int(raw)
        except (TypeError, ValueError):
            raise ConfigurationError(
                "server.port", "port must be an integer",
                expected_value="1-65535", actual_value=raw,
            )
        if not 0 < port < 65536:
            raise ConfigurationError(
                "server.port", "port out of range",
                expected_value="1-65535", actual_value=port,
            )
        return port

    @classmethod
    def get_cors_origins(cls) -> List[str]:
        return cls.get_list("cors.allow_origins", ["*"])

    @classmethod
    def get_seed_enabled(cls) -> bool:
        return cls.get_bool("store.seed_enabled", True)

    @classmethod
    def get_logging_config(cls) -> Dict[str, Any]:
        """
        Return a ``ComprehensiveLogger.initialize()``-compatible dict
        built from the resolved logging settings.
        """
        return {
            "log_folder":     cls.get("logging.folder"),
            "log_level":      cls.get("logging.level").upper(),
            "enable_console": cls.get_bool("logging.enable_console", True),
            "enable_file":    cls.get_bool("logging.enable_file", False),
            "max_bytes":      cls.get_int("logging.max_bytes", 10 * 1024 * 1024),
            "backup_count":   cls.get_int("logging.backup_count", 5),
        }

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @classmethod
    def _find_config_file(cls) -> Optional[Path]:
        """Search for config.properties starting from the project root."""
        fixed = Path(__file__).parent.parent.parent / "config.properties"
        if fixed.exists():
            return fixed

        current = Path.cwd()
        for _ in range(4):
            candidate = current / "config.properties"
            if candidate.exists():
                return candidate
            if current.parent == current:
                break
            current = current.parent

        return None

    @classmethod
    def _parse_file(cls, path: Path) -> None:
        """Parse a Java-style .properties file into ``_properties``."""
        with open(path, "r", encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if not line or line.startswith("#") or line.startswith("!"):
                    continue
                for sep in ("=", ":"):
                    if sep in line:
                        key, value = line.split(sep, 1)
                        cls._properties[key.strip()] = value.strip()
                        break
