"""Shared helpers for configuration models and data merging."""
