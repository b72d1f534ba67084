import json
from pathlib import Path

import yaml


def from_json_or_yaml(file_path):
    """
    Load a mapping from a JSON or YAML file, chosen by the file suffix.

    Args:
    file_path (str | Path): The path of the config file.

    Returns:
    config (dict): The parsed content, or an empty dict for an empty file.
    """
    path = Path(file_path)
    if not path.is_file():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        return json.loads(text) if text.strip() else {}
    if path.suffix.lower() in (".yaml", ".yml"):
        return yaml.safe_load(text) or {}
    raise ValueError(f"Unsupported config file type (expected .json/.yaml/.yml): {path}")
