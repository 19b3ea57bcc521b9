"""
citegraph.config.loader - Configuration file discovery and loading.

Configuration is layered, later layers winning:
1. DEFAULT_CONFIG
2. .citegraph.toml
3. .citegraph.local.toml next to it (optional, not committed)
4. CITEGRAPH_<SECTION>_<KEY> environment variables
"""

from __future__ import annotations

import copy
import json
import os
import re
from pathlib import Path
from typing import Any, Dict, Optional

import tomlkit
from tomlkit import TOMLDocument

from citegraph.config.defaults import (
    CONFIG_FILENAME,
    DEFAULT_CONFIG,
    ENV_PREFIX,
    LOCAL_CONFIG_FILENAME,
)

_INTEGER = re.compile(r"[+-]?\d+")


def parse_toml_document(content: str) -> TOMLDocument:
    """Parse TOML text into a tomlkit document (preserves formatting)."""
    return tomlkit.parse(content)


def parse_toml(content: str) -> Dict[str, Any]:
    """Parse TOML text into plain Python dicts and lists."""
    return parse_toml_document(content).unwrap()


def merge_configs(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Deep-merge override into a copy of base.

    Nested dicts are merged key by key; any other value in override
    replaces the value in base.
    """
    result = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = copy.deepcopy(value)
    return result


def _try_parse_env_value(value: str) -> Any:
    """Parse an environment value into a typed value where it looks typed.

    JSON arrays and objects, true/false and signed integers are converted;
    anything else (including malformed JSON) is returned unchanged.
    """
    stripped = value.strip()
    if stripped.lower() == "true":
        return True
    if stripped.lower() == "false":
        return False
    if _INTEGER.fullmatch(stripped):
        return int(stripped)
    if stripped.startswith(("[", "{")):
        try:
            return json.loads(stripped)
        except json.JSONDecodeError:
            return value
    return value


def _apply_env_overrides(config: Dict[str, Any]) -> Dict[str, Any]:
    """Apply CITEGRAPH_<SECTION>_<KEY> environment variables to config.

    The first token after the prefix names the section; the rest, lowercased,
    names the key (so CITEGRAPH_PARSER_ON_MALFORMED sets parser.on_malformed).
    """
    for name, raw in os.environ.items():
        if not name.startswith(ENV_PREFIX):
            continue
        section, _, key = name[len(ENV_PREFIX) :].lower().partition("_")
        if not section or not key:
            continue
        target = config.setdefault(section, {})
        if isinstance(target, dict):
            target[key] = _try_parse_env_value(raw)
    return config


class ConfigLoader:
    """Read access to a merged configuration with dotted keys."""

    def __init__(self, data: Dict[str, Any], path: Optional[Path] = None) -> None:
        self._data = data
        self.path = path

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ConfigLoader":
        """Wrap an already-merged configuration dict."""
        return cls(data)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value by dotted key, e.g. ``loader.max_records``."""
        node: Any = self._data
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def get_raw(self) -> Dict[str, Any]:
        """Return the underlying configuration dict."""
        return self._data


def find_git_root(start: Optional[Path] = None) -> Optional[Path]:
    """Find the enclosing git repository root.

    A ``.git`` directory or file (worktrees) marks the root.
    """
    current = (start or Path.cwd()).resolve()
    for candidate in (current, *current.parents):
        if (candidate / ".git").exists():
            return candidate
    return None


def find_config_file(start: Optional[Path] = None) -> Optional[Path]:
    """Find .citegraph.toml in start or its parents.

    The search stops at the git root, if there is one.
    """
    current = (start or Path.cwd()).resolve()
    for candidate in (current, *current.parents):
        config_path = candidate / CONFIG_FILENAME
        if config_path.is_file():
            return config_path
        if (candidate / ".git").exists():
            break
    return None


def load_config(config_path: Path) -> ConfigLoader:
    """Load a configuration file merged over the defaults.

    A sibling .citegraph.local.toml, if present, is merged over the file,
    then environment overrides are applied.

    Args:
        config_path: Path to the TOML configuration file.

    Returns:
        ConfigLoader over the merged configuration.
    """
    data = merge_configs(DEFAULT_CONFIG, parse_toml(config_path.read_text(encoding="utf-8")))

    local_path = config_path.parent / LOCAL_CONFIG_FILENAME
    if local_path.is_file():
        data = merge_configs(data, parse_toml(local_path.read_text(encoding="utf-8")))

    return ConfigLoader(_apply_env_overrides(data), path=config_path)


def get_config(
    config_path: Optional[Path] = None, start_path: Optional[Path] = None
) -> Dict[str, Any]:
    """Resolve the effective configuration as a dict.

    Uses config_path if given, otherwise searches from start_path (or the
    current directory). Falls back to the defaults plus environment
    overrides when no file is found.
    """
    if config_path is None:
        config_path = find_config_file(start_path)
    if config_path is None:
        return _apply_env_overrides(copy.deepcopy(DEFAULT_CONFIG))
    return load_config(config_path).get_raw()
