"""Configuration management system"""

import os
from pathlib import Path
from typing import Any, Dict, Optional
import yaml
from dotenv import load_dotenv

from aleo_stake.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_API_ROOT = "https://api.explorer.provable.com/v1"
DEFAULT_NETWORK = "mainnet"
DEFAULT_HTTP_TIMEOUT = 30.0


class Config:
    """Configuration manager for the stake adapter"""

    def __init__(self, config_path: Optional[str] = None, load_env: bool = True):
        """
        Initialize configuration

        Args:
            config_path: Path to config YAML file. If None, uses default config/config.yaml
            load_env: Whether to load the project .env file before substitution
        """
        # Project root directory
        self.project_root = Path(__file__).parent.parent.parent

        if load_env:
            env_path = self.project_root / '.env'
            if env_path.exists():
                load_dotenv(dotenv_path=env_path)
                logger.debug(f"Loaded environment variables from: {env_path}")

        if config_path is None:
            config_path = self.project_root / "config" / "config.yaml"

        self.config_path = Path(config_path)
        self._config = self._load_yaml_config()

        # Apply environment variable substitutions
        self._substitute_env_vars(self._config)

    def _load_yaml_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file, or nothing when it is absent"""
        if not self.config_path.exists():
            logger.debug(f"Config file not found, using environment defaults: {self.config_path}")
            return {}

        with open(self.config_path, 'r', encoding='utf-8') as f:
            return yaml.safe_load(f) or {}

    def _substitute_env_vars(self, config: Any) -> None:
        """
        Recursively substitute environment variables in config
        Format: ${VAR_NAME:default_value} or ${VAR_NAME}
        """
        if isinstance(config, dict):
            for key, value in config.items():
                if isinstance(value, str) and value.startswith('${') and value.endswith('}'):
                    var_content = value[2:-1]
                    if ':' in var_content:
                        var_name, default = var_content.split(':', 1)
                    else:
                        var_name, default = var_content, None

                    # An empty variable counts as unset
                    config[key] = os.getenv(var_name) or default
                elif isinstance(value, (dict, list)):
                    self._substitute_env_vars(value)
        elif isinstance(config, list):
            for item in config:
                self._substitute_env_vars(item)

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get configuration value by dot-separated key path

        Args:
            key_path: Dot-separated path (e.g., 'aleo.network')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key_path.split('.')
        value = self._config

        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default

        return value

    @property
    def api_root(self) -> str:
        """Explorer API root, without a trailing slash"""
        root = self.get('aleo.api_root') or os.getenv('NEXT_PUBLIC_API_ROOT') or DEFAULT_API_ROOT
        return root.rstrip('/')

    @property
    def network(self) -> str:
        return self.get('aleo.network') or os.getenv('ALEO_NETWORK') or DEFAULT_NETWORK

    @property
    def http_timeout(self) -> float:
        return float(self.get('http.timeout') or DEFAULT_HTTP_TIMEOUT)

    @property
    def log_level(self) -> str:
        """Get log level"""
        return self.get('logging.level', 'INFO')

    def __repr__(self) -> str:
        return f"Config(config_path={self.config_path}, network={self.network})"


# Global config instance
_config_instance: Optional[Config] = None


def get_config(config_path: Optional[str] = None) -> Config:
    """
    Get global config instance (singleton)

    Args:
        config_path: Path to config file (only used on first call)

    Returns:
        Config instance
    """
    global _config_instance

    if _config_instance is None:
        _config_instance = Config(config_path)

    return _config_instance


def reload_config(config_path: Optional[str] = None) -> Config:
    """Reload configuration (useful for testing or config changes)"""
    global _config_instance
    _config_instance = Config(config_path)
    return _config_instance
