"""Logging, paths and error formatting."""
