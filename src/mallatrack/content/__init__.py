"""Bundled curriculum definitions."""
