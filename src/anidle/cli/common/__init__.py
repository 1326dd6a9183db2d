"""Shared CLI plumbing: context, error handling and runtime setup."""
