#!/usr/bin/env python3
"""
Storefront Catalog - Main Entry Point

Groups catalog products into brand/model cards with RAM/Storage variants
and writes the storefront view model as JSON.
"""

import argparse
import sys

from shared.logging_utils import (
    log_and_status,
    log_error,
    log_section_header,
    log_success,
    log_summary,
    log_warning,
    setup_logging,
)
from storefront.src.availability import filter_available_products
from storefront.src.catalog_client import CatalogClient, CatalogFetchError
from storefront.src.config import load_config
from storefront.src.grouping import group_products_by_variants
from storefront.src.loader import load_catalog_products
from storefront.src.output import summarize_groups, write_groups


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Storefront Catalog Variant Grouper")
    parser.add_argument("--source", choices=["file", "api"], default="file",
                        help="Read products from an export file or the backend API")
    parser.add_argument("--input", help="Path to products JSON/Excel export (file source)")
    parser.add_argument("--output", help="Path to output JSON file")
    parser.add_argument("--config", help="Path to config JSON file")
    parser.add_argument("--log-file", help="Path to log file")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def run(args: argparse.Namespace, status=print) -> int:
    """
    Load, group and write products.

    Returns:
        Process exit code
    """
    setup_logging(args.log_file, verbose=args.verbose)
    config = load_config(args.config)
    if not args.log_file and config.get("log_file"):
        setup_logging(config["log_file"], verbose=args.verbose)

    input_file = args.input or config.get("input_file")
    output_file = args.output or config.get("output_file")

    log_section_header(status, "Storefront Catalog Variant Grouper")

    if not output_file:
        log_error(status, "No output file given", details="use --output or set output_file in config")
        return 1

    try:
        if args.source == "api":
            log_and_status(status, "Fetching products from backend...")
            products = CatalogClient(config).fetch_products()
        else:
            if not input_file:
                log_error(status, "No input file given", details="use --input or set input_file in config")
                return 1
            log_and_status(status, f"Loading products from {input_file}")
            products = load_catalog_products(input_file)
    except (CatalogFetchError, RuntimeError, FileNotFoundError, ValueError) as e:
        log_error(status, "Failed to load products", exc=e)
        return 1

    available = filter_available_products(products)
    if not available:
        log_warning(status, "No available products to group", details=f"{len(products)} products loaded")

    groups = group_products_by_variants(products)
    try:
        write_groups(groups, output_file)
    except OSError as e:
        log_error(status, f"Failed to write {output_file}", exc=e)
        return 1
    log_success(status, f"Wrote {len(groups)} groups to {output_file}")

    stats = summarize_groups(groups)
    log_summary(status, "Summary", {
        "Products loaded": len(products),
        "Products available": len(available),
        "Groups": stats["groups"],
        "Variants": stats["variants"],
        "Colors": stats["colors"],
    })
    return 0


def main():
    """CLI entry point."""
    args = build_parser().parse_args()
    sys.exit(run(args))


if __name__ == "__main__":
    main()
