# File: utils/config_utils.py
# Description: Utility functions for loading configuration files.

import logging  # Import logging to report fallbacks to the default configuration
import os  # Import OS for file handling

import yaml  # Import PyYAML for reading and parsing YAML files

logger = logging.getLogger(__name__)


class ConfigLoaderError(Exception):
    """
    Custom exception for errors encountered during configuration loading or validation.
    """
    pass


def load_config(config_file_path: str, default_config: dict = None) -> dict:
    """
    Load the configuration from a YAML file.

    Args:
        config_file_path (str): Path to the YAML configuration file.
        default_config (dict, optional): Default configuration to use if loading fails.

    Returns:
        dict: Parsed configuration dictionary.

    Raises:
        ConfigLoaderError: If the configuration file does not exist, fails to parse,
            or does not contain a mapping.
    """
    # Step 1: Check if the YAML file exists at the specified path
    if not os.path.exists(config_file_path):
        if default_config is not None:
            logger.warning(f"Config file '{config_file_path}' not found. Using default configuration.")
            return dict(default_config)
        raise ConfigLoaderError(f"Config file '{config_file_path}' not found.")

    # Step 2: Attempt to load the YAML file
    try:
        with open(config_file_path, "r") as config_file:
            config = yaml.safe_load(config_file)
    except yaml.YAMLError as e:
        if default_config is not None:
            logger.warning(f"Error parsing YAML file '{config_file_path}': {e}. Using default configuration.")
            return dict(default_config)
        raise ConfigLoaderError(f"Error parsing YAML file '{config_file_path}': {e}") from e

    # Step 3: An empty file parses to None; anything but a mapping is unusable
    if config is None:
        config = {}
    if not isinstance(config, dict):
        raise ConfigLoaderError(f"Config file '{config_file_path}' must contain a mapping at the top level.")
    return config

