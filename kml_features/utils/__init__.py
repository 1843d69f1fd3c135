"""Presentation helpers for converted feature collections."""
