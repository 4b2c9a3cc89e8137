"""Configuration management."""

import copy
import json
import yaml
from pathlib import Path
from typing import Dict, Any

from ..errors import UnsupportedFileFormat


def load_config(config_path: str) -> Dict[str, Any]:
    """Load configuration from YAML or JSON file, layered over the defaults."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path, 'r', encoding='utf-8') as f:
        if path.suffix.lower() in ['.yaml', '.yml']:
            loaded = yaml.safe_load(f)
        elif path.suffix.lower() == '.json':
            loaded = json.load(f)
        else:
            raise UnsupportedFileFormat("config", path.suffix)

    return merge_config(get_default_config(), loaded or {})


def merge_config(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively overlay override onto a copy of base."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = value
    return merged


def get_default_config() -> Dict[str, Any]:
    """Get default configuration."""
    return {
        'timeline': {
            'padding_days': 7,
            'default_window_days': 60,
            'granularity': 'month',
            'week_label_prefix': 'S',
        },
        'geometry': {
            'header_height': 64,  # 4rem
            'row_height': 56,  # 3.5rem
            'elbow_offset': 10,
            'px_per_day': {
                'month': 30,
                'week': 50,
            },
        },
        'critical_chain': {
            'policy': 'first-predecessor',
            'reject_cycles': True,
        },
        'locale': 'es',
    }
