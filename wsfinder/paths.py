import logging
import os
from pathlib import Path

logger = logging.getLogger("wsfinder")

CONFIG_ENV_VAR = "WSFINDER_CONFIG"

DEFAULT_CONFIG_PATH = Path.home() / ".wsfinder" / "config.json"


def resolve_config_path() -> Path:
    """Config file location, honouring the WSFINDER_CONFIG override."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return DEFAULT_CONFIG_PATH
