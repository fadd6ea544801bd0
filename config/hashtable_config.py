# File: config/hashtable_config.py
# Resolves the hash table settings from the bundled YAML file, an optional .env file
# in the config directory, and HASHTABLE_* environment variables (highest priority).

import logging  # Import logging to trace where settings came from
import os  # Import os for accessing environment variables
from fractions import Fraction  # Thresholds may be written as exact fractions such as "2/3"
from pathlib import Path  # Import Path for managing filesystem paths
from typing import Optional

from dotenv import load_dotenv  # Import load_dotenv to load environment variables from a .env file

from config.logger_config import VALID_OUTPUTS
from utils.config_utils import ConfigLoaderError, load_config

logger = logging.getLogger(__name__)

CONFIG_DIR = Path(__file__).resolve().parent
DEFAULT_CONFIG_PATH = CONFIG_DIR / "hashtable.yaml"
ENV_PATH = CONFIG_DIR / ".env"

TABLE_SETTINGS = ["initial_capacity", "load_factor_threshold", "growth_factor"]

DEFAULT_CONFIG = {
    "initial_capacity": 4,
    "load_factor_threshold": "2/3",
    "growth_factor": 2,
    "logging": {
        "level": "INFO",
        "output": "console",
        "log_file": "hashtable.log",
    },
}

# Environment variable -> configuration key
ENV_OVERRIDES = {
    "HASHTABLE_INITIAL_CAPACITY": "initial_capacity",
    "HASHTABLE_LOAD_FACTOR_THRESHOLD": "load_factor_threshold",
    "HASHTABLE_GROWTH_FACTOR": "growth_factor",
}


def _to_int(key: str, value) -> int:
    if isinstance(value, bool):
        raise ConfigLoaderError(f"Configuration value '{key}' must be an integer, got {value!r}.")
    try:
        return int(str(value).strip())
    except ValueError as e:
        raise ConfigLoaderError(f"Configuration value '{key}' must be an integer, got {value!r}.") from e


def _to_ratio(key: str, value) -> float:
    if isinstance(value, bool):
        raise ConfigLoaderError(f"Configuration value '{key}' must be a number or fraction, got {value!r}.")
    try:
        return float(Fraction(str(value).strip()))
    except (ValueError, ZeroDivisionError) as e:
        raise ConfigLoaderError(f"Configuration value '{key}' must be a number or fraction, got {value!r}.") from e


def parse_log_level(level) -> int:
    """
    Convert a level name such as "DEBUG" (or a numeric level) to a logging constant.

    Raises:
        ConfigLoaderError: If the name is not a known logging level.
    """
    if isinstance(level, int) and not isinstance(level, bool):
        return level
    resolved = getattr(logging, str(level).strip().upper(), None)
    if not isinstance(resolved, int):
        raise ConfigLoaderError(f"Unknown log level: {level!r}")
    return resolved


def get_hashtable_config(config_path: Optional[str] = None) -> dict:
    """
    Build the hash table configuration.

    The YAML file is chosen from, in order: the `config_path` argument, the
    HASHTABLE_CONFIG_FILE environment variable, and config/hashtable.yaml. Values from
    HASHTABLE_INITIAL_CAPACITY, HASHTABLE_LOAD_FACTOR_THRESHOLD, HASHTABLE_GROWTH_FACTOR
    and HASHTABLE_LOG_LEVEL override the file.

    Args:
        config_path (Optional[str]): Explicit path to a YAML configuration file.

    Returns:
        dict: Configuration with typed initial_capacity (int), load_factor_threshold (float),
            growth_factor (int) and a logging block whose level is a logging constant.

    Raises:
        ConfigLoaderError: If an explicit file is missing or a value cannot be converted.
    """
    # Load variables from config/.env when present; existing environment variables win
    if load_dotenv(dotenv_path=ENV_PATH):
        logger.debug(f"Loaded environment overrides from {ENV_PATH}.")

    explicit_path = config_path or os.getenv("HASHTABLE_CONFIG_FILE")
    if explicit_path:
        config = load_config(str(explicit_path))
    else:
        config = load_config(str(DEFAULT_CONFIG_PATH), default_config=DEFAULT_CONFIG)

    # Fill gaps in a partial file from the defaults
    logging_block = config.get("logging") or {}
    if not isinstance(logging_block, dict):
        raise ConfigLoaderError(f"The 'logging' setting must be a mapping, got {logging_block!r}.")
    merged = {key: value for key, value in DEFAULT_CONFIG.items() if key != "logging"}
    merged.update({key: value for key, value in config.items() if key != "logging"})
    merged["logging"] = {**DEFAULT_CONFIG["logging"], **logging_block}

    for env_var, key in ENV_OVERRIDES.items():
        value = os.getenv(env_var)
        if value:
            logger.debug(f"Overriding '{key}' from {env_var}.")
            merged[key] = value
    if os.getenv("HASHTABLE_LOG_LEVEL"):
        merged["logging"]["level"] = os.getenv("HASHTABLE_LOG_LEVEL")

    # A key written without a value in the YAML file parses to None
    empty_settings = [key for key in TABLE_SETTINGS if merged[key] is None]
    if empty_settings:
        raise ConfigLoaderError(f"Table settings without a value: {empty_settings}")

    merged["initial_capacity"] = _to_int("initial_capacity", merged["initial_capacity"])
    merged["growth_factor"] = _to_int("growth_factor", merged["growth_factor"])
    merged["load_factor_threshold"] = _to_ratio("load_factor_threshold", merged["load_factor_threshold"])
    merged["logging"]["level"] = parse_log_level(merged["logging"]["level"])

    # Reject log targets configure_logger cannot build
    output = merged["logging"]["output"]
    if not isinstance(output, str) or output not in VALID_OUTPUTS:
        raise ConfigLoaderError(
            f"Invalid log output {output!r}. Expected one of {sorted(VALID_OUTPUTS)}."
        )
    return merged
