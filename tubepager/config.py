"""Configuration management with environment variable and file support"""

import logging
import os
import yaml
from pathlib import Path
from typing import Optional, Dict, Any

logger = logging.getLogger(__name__)


class Config:
    def __init__(self, config_file: Optional[str] = None):
        self.config_file = config_file or "config.yaml"
        self._config: Dict[str, Any] = {}
        self._load_config()

    def _load_config(self):
        config_path = Path(self.config_file)
        if not config_path.exists():
            self._config = {}
            return

        try:
            with open(config_path, 'r') as f:
                loaded = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"⚠️  Could not load config file {config_path}: {e}")
            loaded = {}

        if not isinstance(loaded, dict):
            logger.warning(f"⚠️  Config file {config_path} is not a mapping, ignoring it")
            loaded = {}
        self._config = loaded

    def get(self, key: str, default: Any = None, env_var: Optional[str] = None) -> Any:
        env_key = env_var or key.upper().replace('.', '_')
        env_value = os.getenv(env_key)
        if env_value is not None:
            return env_value

        value: Any = self._config
        for k in key.split('.'):
            if isinstance(value, dict):
                value = value.get(k)
            else:
                value = None
                break

        return default if value is None else value

    def get_bool(self, key: str, default: bool = False, env_var: Optional[str] = None) -> bool:
        value = self.get(key, default, env_var)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in ('true', '1', 'yes', 'on')
        return bool(value)

    def get_int(self, key: str, default: int = 0, env_var: Optional[str] = None) -> int:
        value = self.get(key, default, env_var)
        try:
            return int(value)
        except (ValueError, TypeError):
            return default

    def get_float(self, key: str, default: float = 0.0, env_var: Optional[str] = None) -> float:
        value = self.get(key, default, env_var)
        try:
            return float(value)
        except (ValueError, TypeError):
            return default
