"""Patch notes page parsing and diff document writing."""
