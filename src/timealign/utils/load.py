from pathlib import Path

import yaml


def load_yaml(p: Path, *, require_mapping: bool = True):
    """Read a request YAML file; an empty file yields an empty mapping."""
    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise FileNotFoundError(f"Request file not found: {p}") from e
    except yaml.YAMLError as e:
        raise ValueError(f"Request file {p} is not valid YAML: {e}") from e

    if data is None:
        return {}
    if require_mapping and not isinstance(data, dict):
        raise TypeError(
            f"Request file {p} must hold a mapping of request keys, got {type(data).__name__}")
    return data
