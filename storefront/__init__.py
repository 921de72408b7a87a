"""Storefront catalog tool."""
