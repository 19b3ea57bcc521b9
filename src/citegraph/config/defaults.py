"""
citegraph.config.defaults - Default configuration values.
"""

from typing import Any, Dict

CONFIG_FILENAME = ".citegraph.toml"
LOCAL_CONFIG_FILENAME = ".citegraph.local.toml"
ENV_PREFIX = "CITEGRAPH_"

DEFAULT_CONFIG: Dict[str, Any] = {
    "parser": {
        # "skip" records malformed field lines and continues; "raise" aborts
        "on_malformed": "skip",
    },
    "loader": {
        # 0 = read every record
        "max_records": 0,
        "progress_every": 10000,
    },
    "graph": {
        "merge_equal_satellites": False,
    },
}
