"""
citegraph.config - Configuration loading and defaults
"""

from citegraph.config.defaults import DEFAULT_CONFIG
from citegraph.config.loader import (
    ConfigLoader,
    find_config_file,
    find_git_root,
    get_config,
    load_config,
    merge_configs,
    parse_toml,
    parse_toml_document,
)

__all__ = [
    "ConfigLoader",
    "DEFAULT_CONFIG",
    "find_config_file",
    "find_git_root",
    "get_config",
    "load_config",
    "merge_configs",
    "parse_toml",
    "parse_toml_document",
]
