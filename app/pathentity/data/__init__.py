"""Bundled data files for pathentity."""
