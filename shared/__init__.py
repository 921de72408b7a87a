"""
Shared utilities for catalog tools.

This package provides common functionality used by the storefront catalog
tooling: text and number normalization, file I/O, HTTP helpers and logging.
"""

from .text_utils import (
    normalize_whitespace,
    parse_number,
    parse_bool,
)

from .json_utils import (
    load_json_file,
    save_json_file,
)

from .excel_utils import (
    excel_to_json,
    is_excel_file,
    load_records,
)

from .http_utils import (
    build_api_headers,
    RateLimiter,
    retry_request,
)

__all__ = [
    # Text utilities
    "normalize_whitespace",
    "parse_number",
    "parse_bool",
    # JSON utilities
    "load_json_file",
    "save_json_file",
    # Excel utilities
    "excel_to_json",
    "is_excel_file",
    "load_records",
    # HTTP utilities
    "build_api_headers",
    "RateLimiter",
    "retry_request",
]
