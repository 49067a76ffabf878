"""Configuration loader for HashCrawler"""

import copy
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..error_handling.exceptions import ConfigurationError
from ..models.enums import OutputFormat

CONFIG_ENV_VAR = "HASHCRAWLER_CONFIG"
DEFAULT_CONFIG_NAME = "hashcrawler.yaml"

DEFAULT_CONFIG = {
    "version": "1.0.0",
    "output": {
        "format": "Text",
        "json_indent": 2,
        "color": True
    },
    "parallel": {
        "workers": 1
    },
    "logging": {
        "level": "WARNING"
    },
}


class Config:
    """Configuration manager for HashCrawler"""

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = self._resolve_path(config_path)
        self._config = self._load_config()

    @staticmethod
    def _resolve_path(config_path: Optional[str]) -> Path:
        """Explicit path, then the environment, then the project root"""
        config_path = config_path or os.getenv(CONFIG_ENV_VAR) or DEFAULT_CONFIG_NAME
        path = Path(config_path)
        if not path.is_absolute():
            project_root = Path(__file__).parent.parent.parent.parent
            candidate = Path.cwd() / path
            path = candidate if candidate.exists() else project_root / path
        return path

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file, layered over the defaults"""
        config = self._get_default_config()
        if not self.config_path.exists():
            return config

        try:
            with open(self.config_path, 'r') as f:
                loaded = yaml.safe_load(f)
        except (OSError, yaml.YAMLError):
            return config

        if isinstance(loaded, dict):
            _merge(config, loaded)
        return config

    def _get_default_config(self) -> Dict[str, Any]:
        """Get default configuration"""
        return copy.deepcopy(DEFAULT_CONFIG)

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value using dot notation"""
        value = self._config
        try:
            for k in key.split('.'):
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    @property
    def output_format(self) -> OutputFormat:
        """Default output format; raises on an unrecognized selector"""
        return OutputFormat.parse(self.get('output.format', 'Text'))

    @property
    def json_indent(self) -> int:
        return self._get_int('output.json_indent', 2, minimum=0)

    @property
    def color(self) -> bool:
        """Whether text output is colorized"""
        return bool(self.get('output.color', True))

    @property
    def workers(self) -> int:
        """Thread pool size used for batch classification"""
        return self._get_int('parallel.workers', 1, minimum=1)

    @property
    def log_level(self) -> str:
        return str(self.get('logging.level', 'WARNING')).upper()

    @property
    def version(self) -> str:
        """Get application version"""
        return self.get('version', '1.0.0')

    def _get_int(self, key: str, default: int, minimum: int) -> int:
        value = self.get(key, default)
        if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
            raise ConfigurationError(
                f"Invalid value for {key}: {value!r} (expected an integer >= {minimum})",
                {'key': key, 'value': value}
            )
        return value


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> None:
    """Recursively merge ``override`` into ``base`` in place"""
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value


# Global config instance
config = Config()
