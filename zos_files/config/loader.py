"""Configuration loading for z/OSMF connections.

This module handles loading connection settings from a YAML file
and environment variables.

Contract:
- Inputs: Config file paths, environment variables
- Outputs: ZosmfSettings objects
- Side Effects: Creates default config file if missing
"""

import logging
import os
from pathlib import Path

import yaml

from .paths import get_config_dir
from .settings import ZosmfSettings

logger = logging.getLogger(__name__)

ENV_PREFIX = "ZOWE_OPT_"

DEFAULT_CONFIG = """# z/OSMF connection configuration
# Environment variables prefixed with ZOWE_OPT_ override these values
# (e.g., ZOWE_OPT_HOST, ZOWE_OPT_PASSWORD)

host: "localhost"
port: 443
protocol: "https"
reject_unauthorized: true
timeout: 30
log_level: "info"

# Credentials are best supplied through ZOWE_OPT_USER / ZOWE_OPT_PASSWORD
# user: "ibmuser"
# base_path: ""
"""


def get_config_path() -> Path:
    """Get path to config file.

    Returns:
        Path to zosmf.yaml in config directory
    """
    return get_config_dir() / "zosmf.yaml"


def create_default_config() -> None:
    """Create default config file if it doesn't exist."""
    config_path = get_config_path()

    if config_path.exists():
        logger.debug(f"Config file already exists: {config_path}")
        return

    config_path.write_text(DEFAULT_CONFIG, encoding="utf-8")
    logger.info(f"Created default config: {config_path}")


def load_config(config_path: Path | None = None) -> ZosmfSettings:
    """Load connection configuration from YAML and environment.

    Precedence: defaults < YAML < environment variables.

    Args:
        config_path: Optional config file path (default: zosmf.yaml in config dir)

    Returns:
        Validated connection settings

    Example:
        >>> settings = load_config()
        >>> session = settings.to_session()
    """
    if config_path is None:
        config_path = get_config_path()
        if not config_path.exists():
            create_default_config()

    yaml_settings = {}
    if config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                yaml_settings = yaml.safe_load(f) or {}
            logger.debug(f"Loaded config from {config_path}")
        except Exception as e:
            logger.warning(f"Failed to load config from {config_path}: {e}")
            logger.info("Using default settings and environment variables")

    if not isinstance(yaml_settings, dict):
        logger.warning(f"Ignoring config in {config_path}: expected a mapping")
        yaml_settings = {}

    # Only pass YAML values that don't have corresponding env vars
    filtered_yaml = {}
    for key, value in yaml_settings.items():
        env_key = f"{ENV_PREFIX}{str(key).upper()}"
        if env_key not in os.environ:
            filtered_yaml[key] = value

    settings = ZosmfSettings(**filtered_yaml)

    logger.info(f"z/OSMF configuration loaded: host={settings.host}, port={settings.port}")

    return settings
