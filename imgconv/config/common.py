"""
Common configuration settings used throughout the application.

This module contains the globally shared constants of imgconv: the logger
formats, the quality bounds and the default values for command-line options.
It also handles the loading of user-specific defaults from an external YAML
file, allowing users to change e.g. the default quality without typing it on
every invocation.
"""
import os
from pathlib import Path

import yaml
from loguru import logger

# --- Quality Settings ---
# Bounds for the quality parameter passed to lossy encoders (JPEG, WebP, AVIF).
QUALITY_MIN = 1
QUALITY_MAX = 100

# Used when neither the command line nor the user config provides a quality.
DEFAULT_QUALITY = 90

DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


# --- Logging Configuration ---

# Compact format for regular runs. The tool talks to a human on a terminal,
# so only the level and the message are shown.
LOGGER_FORMAT = "<level>{level: <8}</level> | <level>{message}</level>"

# Detailed format used when the log level is DEBUG.
DEBUG_LOGGER_FORMAT = (
    "<green>{time:MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


# --- User-Defined Configuration ---
# An optional YAML file holding default values for command-line options:
#
#   defaults:
#     quality: 85
#     log_level: DEBUG
#
# The location can be overridden with the IMGCONV_CONFIG environment variable.

CONFIG_ENV_VAR = "IMGCONV_CONFIG"
DEFAULT_USER_CONFIG_PATH = Path.home() / ".config" / "imgconv" / "config.user.yaml"


def get_user_config_path() -> Path:
    """Returns the user config location, honoring the IMGCONV_CONFIG override."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return DEFAULT_USER_CONFIG_PATH


def load_user_config(config_path: Path | None = None) -> dict:
    """
    Loads the `defaults` section of the user config file.

    A missing file is normal and yields an empty mapping. A file that cannot be
    read or parsed is reported with a warning and otherwise ignored, so a broken
    config never prevents a conversion.

    Args:
        config_path: The YAML file to read. Defaults to `get_user_config_path()`.

    Returns:
        A dictionary with the recognized keys (`quality`, `log_level`) that were
        present in the file.
    """
    config_path = config_path or get_user_config_path()
    if not config_path.is_file():
        logger.debug(f"User config '{config_path}' not found. Using built-in defaults.")
        return {}

    try:
        with config_path.open("r", encoding="utf-8") as f:
            user_config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Could not load or parse '{config_path}': {e}")
        return {}

    if not isinstance(user_config, dict):
        return {}
    defaults_config = user_config.get("defaults") or {}
    if not isinstance(defaults_config, dict):
        logger.warning(f"'defaults' in '{config_path}' is not a mapping. Ignoring it.")
        return {}

    loaded = {}
    quality = defaults_config.get("quality")
    if quality is not None:
        try:
            loaded["quality"] = int(quality)
        except (TypeError, ValueError):
            logger.warning(f"Ignoring non-integer quality '{quality}' in '{config_path}'.")

    log_level = defaults_config.get("log_level")
    if log_level is not None:
        log_level = str(log_level).upper()
        if log_level in LOG_LEVELS:
            loaded["log_level"] = log_level
        else:
            logger.warning(f"Ignoring unknown log_level '{log_level}' in '{config_path}'.")

    return loaded
