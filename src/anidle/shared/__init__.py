"""Shared utilities for Anidle: constants, errors and logging."""
