"""Path resolution for zos_files configuration.

Contract:
- Inputs: Environment variables (ZOWE_CLI_HOME, ZOWE_CONFIG_DIR)
- Outputs: Resolved Path objects
- Side Effects: Creates the config directory if it doesn't exist
"""

import os
from pathlib import Path


def get_home_dir() -> Path:
    """Get ZOWE_CLI_HOME from environment.

    Returns:
        Path to root directory (default: ~/.zowe)
    """
    root = os.environ.get("ZOWE_CLI_HOME", "~/.zowe")
    return Path(root).expanduser().resolve()


def get_config_dir() -> Path:
    """Get configuration directory.

    Returns:
        Path to config directory ($ZOWE_CLI_HOME/config)

    Environment Variables:
        ZOWE_CONFIG_DIR: Override config directory location
    """
    config_dir: Path = get_home_dir() / "config"

    env_override: str | None = os.environ.get("ZOWE_CONFIG_DIR")
    if env_override is not None:
        config_dir = Path(env_override).expanduser().resolve()

    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir
