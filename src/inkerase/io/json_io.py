"""
JSON loading and saving for paths and eraser trails.

A path document is a list of objects such as
    {"stroke": "#000000", "coords": [{"x": 0, "y": 0}, {"x": 100, "y": 100}]}
and a trail document is a list of {"x": .., "y": ..} points.
"""

import json
import os

from inkerase.models import Path, Point
from inkerase.tracer import get_tracer


def ensure_dir(path):
    """Create directory if it does not exist."""
    if path:
        os.makedirs(path, exist_ok=True)


def load_json(path):
    """
    Load a JSON document.

    Raises FileNotFoundError if path does not exist.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"JSON file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def save_json(data, path, indent=2):
    """
    Save a dictionary, a Pydantic model or a list of them to JSON.
    """
    tracer = get_tracer()

    ensure_dir(os.path.dirname(path))

    if hasattr(data, "model_dump"):
        data = data.model_dump()
    elif isinstance(data, list):
        data = [item.model_dump() if hasattr(item, "model_dump") else item for item in data]

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent, default=str)

    tracer.event(f"Saved JSON: {path}")


def load_paths(path):
    """Load and validate a list of Paths from a JSON file."""
    data = load_json(path)
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of paths in {path}")
    return [Path.model_validate(item) for item in data]


def load_trail(path):
    """Load an eraser trail (list of Points) from a JSON file."""
    data = load_json(path)
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of points in {path}")
    return [Point.model_validate(item) for item in data]


def save_paths(paths, path):
    """Save Paths to JSON, with attributes next to coords."""
    save_json(paths, path)
