"""Test configuration package (markers and collection hooks)."""
