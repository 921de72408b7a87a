"""
JSON file utilities for catalog tools.

Provides file I/O helpers with consistent error reporting.
"""

import json
import os
from typing import Any


def load_json_file(file_path: str) -> Any:
    """
    Load JSON from file with error handling.

    Args:
        file_path: Path to JSON file

    Returns:
        Parsed JSON data

    Raises:
        RuntimeError: If file doesn't exist or JSON is invalid
    """
    if not os.path.isfile(file_path):
        raise RuntimeError(f"File not found: {file_path}")

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise RuntimeError(f"Invalid JSON in {file_path}: {e}")
    except OSError as e:
        raise RuntimeError(f"Failed to read {file_path}: {e}")


def save_json_file(data: Any, file_path: str, indent: int = 2) -> None:
    """
    Save data to JSON file, creating the parent directory if needed.

    Args:
        data: Data to serialize
        file_path: Path to output file
        indent: JSON indentation (default: 2)
    """
    out_dir = os.path.dirname(file_path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)

    with open(file_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent, ensure_ascii=False)
