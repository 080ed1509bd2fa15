"""
Integration tests against an in-memory SQLite database and the Flask test client.
"""
