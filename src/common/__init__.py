"""Shared helpers: logging, HTTP and URI path utilities."""
