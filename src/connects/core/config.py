import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .exceptions import ConfigError
from .utils import merge_dicts

ENV_PREFIX = "CONNECTS_"

SUREPASS_MODES = ("SANDBOX", "PRODUCTION")
APTOS_NETWORKS = ("DEVNET", "TESTNET", "MAINNET")

class Config:
    def __init__(self, config_path: Optional[Path] = None):
        self._config: Dict[str, Any] = {}
        self._load_defaults()
        self._load_environment_variables()
        if config_path:
            self.load(config_path)
        self.validate(self._config)

    def _load_defaults(self) -> None:
        """Load default configuration values"""
        self._config = {
            "app": {
                "name": "connects",
                "version": "1.0.0",
                "debug": False
            },
            "http": {
                "user_agent": "connects/1.0",
                "verify_ssl": True
            },
            "logging": {
                "level": "INFO",
                "file": None,
                "console_output": False,
                "max_size": 1024 * 1024,
                "backup_count": 3
            },
            "surepass": {
                "mode": "SANDBOX",
                "token": None,
                "version": "v1",
                "timeout": 10.0
            },
            "openexchange": {
                "app_id": None,
                "base_currency": "USD",
                "timeout": 10.0
            },
            "aptos": {
                "network": "MAINNET",
                "version": "v1",
                "timeout": 10.0
            }
        }

    def load(self, path: Path) -> None:
        """Load configuration from a JSON or YAML file"""
        path = Path(path)
        try:
            with open(path, 'r') as f:
                if path.suffix.lower() in (".yaml", ".yml"):
                    file_config = yaml.safe_load(f) or {}
                else:
                    file_config = json.load(f)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to load config from {path}: {str(e)}")
        if not isinstance(file_config, dict):
            raise ConfigError(f"Config file {path} must contain a mapping")
        self.update(file_config)

    def save(self, path: Path) -> None:
        """Save configuration to a JSON or YAML file"""
        path = Path(path)
        with open(path, 'w') as f:
            if path.suffix.lower() in (".yaml", ".yml"):
                yaml.safe_dump(self._config, f, default_flow_style=False)
            else:
                json.dump(self._config, f, indent=2)

    def _load_environment_variables(self) -> None:
        """Load configuration from environment variables"""
        for key, value in os.environ.items():
            if key.startswith(ENV_PREFIX):
                # CONNECTS_OPENEXCHANGE_APP_ID -> openexchange.app_id
                parts = key[len(ENV_PREFIX):].lower().split('_')

                if len(parts) > 2:
                    config_key = f"{parts[0]}.{'_'.join(parts[1:])}"
                else:
                    config_key = '.'.join(parts)

                self.set(config_key, self._convert_value(value))

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by dot notation key"""
        try:
            value = self._config
            for k in key.split('.'):
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def set(self, key: str, value: Any) -> None:
        """Set configuration value by dot notation key"""
        keys = key.split('.')
        d = self._config
        for k in keys[:-1]:
            if not isinstance(d.get(k), dict):
                d[k] = {}
            d = d[k]
        d[keys[-1]] = value

    def update(self, config_dict: Dict[str, Any]) -> None:
        """Update configuration with dictionary"""
        self._config = merge_dicts(self._config, config_dict)

    def section(self, name: str) -> Dict[str, Any]:
        """Return a copy of one top level section"""
        return dict(self._config.get(name) or {})

    def validate(self, config: Dict[str, Any]) -> None:
        """Validate configuration values"""
        for section in ("surepass", "openexchange", "aptos"):
            timeout = (config.get(section) or {}).get("timeout")
            if timeout is not None and (isinstance(timeout, bool) or
                                        not isinstance(timeout, (int, float)) or
                                        timeout <= 0):
                raise ConfigError(f"{section}.timeout must be a positive number")

        mode = (config.get("surepass") or {}).get("mode")
        if mode is not None and str(mode).upper() not in SUREPASS_MODES:
            raise ConfigError(f"surepass.mode must be one of {', '.join(SUREPASS_MODES)}")

        network = (config.get("aptos") or {}).get("network")
        if network is not None and str(network).upper() not in APTOS_NETWORKS:
            raise ConfigError(f"aptos.network must be one of {', '.join(APTOS_NETWORKS)}")

    @staticmethod
    def _convert_value(value: str) -> Any:
        """Convert string value to appropriate type"""
        if value.lower() == "true":
            return True
        if value.lower() == "false":
            return False

        try:
            if '.' in value:
                return float(value)
            return int(value)
        except ValueError:
            return value
