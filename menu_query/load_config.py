"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from menu_query.deep_merge import deep_merge

DEFAULT_CONFIG: dict[str, Any] = {
    "site": {
        "home_url": "http://localhost/",
        "current_url": "",
    },
    # Overrides for the query option defaults, e.g. {"limit": 5}.
    "query_defaults": {},
    "log_level": "WARNING",
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            if not isinstance(user_config, dict):
                msg = f"Configuration file must contain a mapping: {p}"
                raise ValueError(msg)
            config = deep_merge(config, user_config)
    return config
