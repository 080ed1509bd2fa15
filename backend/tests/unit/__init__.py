"""
Unit tests: services, parsers and pure functions with mocked repositories.
"""
