"""
Excel utility functions for reading catalog exports.

This module reads Excel files (.xlsx) into the list-of-dicts format used by
the catalog loaders, and dispatches between Excel and JSON inputs.
"""

import openpyxl
from typing import List, Dict, Any
from pathlib import Path

from shared.json_utils import load_json_file


def excel_to_json(file_path: str) -> List[Dict[str, Any]]:
    """
    Convert Excel file to list of dictionaries (JSON-compatible format).

    Args:
        file_path: Path to Excel file (.xlsx)

    Returns:
        List of dictionaries where keys are column headers. Blank cells are
        returned as None; fully blank rows are skipped.

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If file is not a valid Excel file

    Example:
        >>> products = excel_to_json("input/products.xlsx")
        >>> print(products[0].keys())
        dict_keys(['id', 'brand', 'model', 'ram', 'storage', 'color', ...])
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"Excel file not found: {file_path}")

    if not is_excel_file(str(file_path)):
        raise ValueError(f"File must be Excel format (.xlsx or .xlsm): {file_path}")

    try:
        wb = openpyxl.load_workbook(file_path, read_only=True, data_only=True)
    except Exception as e:
        raise ValueError(f"Failed to read Excel file: {str(e)}")

    try:
        ws = wb.active
        rows = ws.iter_rows(values_only=True)

        # Get headers from first row
        header_row = next(rows, None)
        if header_row is None:
            return []
        headers = [str(h).strip() if h is not None else None for h in header_row]

        records = []
        for row in rows:
            if all(value is None or value == "" for value in row):
                continue
            record = {}
            for i, value in enumerate(row):
                if i < len(headers) and headers[i]:
                    record[headers[i]] = value
            records.append(record)

        return records
    finally:
        wb.close()


def is_excel_file(file_path: str) -> bool:
    """
    Check if a file is an Excel file based on extension.

    Args:
        file_path: Path to file

    Returns:
        True if file has .xlsx or .xlsm extension

    Example:
        >>> is_excel_file("products.xlsx")
        True
        >>> is_excel_file("products.json")
        False
    """
    return Path(file_path).suffix.lower() in ['.xlsx', '.xlsm']


def load_records(file_path: str) -> List[Dict[str, Any]]:
    """
    Load row records from either JSON or Excel file.

    Automatically detects file type and reads accordingly. JSON files may hold
    a bare array or an object with a "products" array.

    Args:
        file_path: Path to JSON or Excel file

    Returns:
        List of row dictionaries

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If file format is not supported or content is not a list
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    if is_excel_file(str(file_path)):
        return excel_to_json(str(file_path))
    elif file_path.suffix.lower() == '.json':
        data = load_json_file(str(file_path))
        if isinstance(data, dict) and isinstance(data.get("products"), list):
            data = data["products"]
        if not isinstance(data, list):
            raise ValueError("JSON file must contain an array of objects")
        return data
    else:
        raise ValueError(f"Unsupported file format: {file_path.suffix}. Use .xlsx or .json")
