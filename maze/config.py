"""
Configuration presets.

Purpose: Load YAML presets and merge them over built-in defaults. A
         config/<preset>.yaml in the working directory overrides the preset
         of the same name shipped in maze/presets/.

Inputs:
    - Preset name (baseline, legacy) or explicit YAML path

Outputs:
    - Config dictionary with symbols, validation, logging, output sections
"""

import copy
from pathlib import Path
from typing import Dict, Optional

import yaml


CONFIG_DIR = Path(__file__).parent / "presets"

DEFAULT_CONFIG = {
    "symbols": {
        "wall": "*",
        "start": "A",
        "goal": "B",
    },
    "validation": {
        "reject_empty": True,
        "duplicate_endpoints": "first",
    },
    "logging": {
        "level": "INFO",
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    },
    "output": {
        "show_map": True,
        "max_matrix_nodes": 40,
    },
}


def _merge(base: Dict, override: Dict) -> Dict:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(preset: str = "baseline", path: Optional[str] = None) -> Dict:
    """
    Load a configuration preset.

    Args:
        preset: Preset name, resolved as ./config/<preset>.yaml, then
                maze/presets/<preset>.yaml
        path: Explicit YAML file; takes precedence over preset

    Returns:
        Config dictionary (defaults merged with file contents)
    """
    if path is not None:
        config_path = Path(path)
    else:
        config_path = Path(f"config/{preset}.yaml")
        if not config_path.exists():
            config_path = CONFIG_DIR / f"{preset}.yaml"

    if not config_path.exists():
        raise FileNotFoundError(f"Config preset not found: {config_path}")

    with open(config_path, 'r') as f:
        data = yaml.safe_load(f) or {}

    return _merge(DEFAULT_CONFIG, data)
