"""
Pytest markers and collection hooks for the AgendaPro tests.

Markers are added from the test file location so suites can be selected
with ``-m unit``, ``-m integration``, ``-m appointment`` and so on.
"""

import pytest


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")
    config.addinivalue_line("markers", "auth: mark test as authentication-related")
    config.addinivalue_line("markers", "api: mark test as API endpoint test")
    config.addinivalue_line("markers", "controllers: mark test as controller-related")
    config.addinivalue_line("markers", "database: mark test as database-related")
    config.addinivalue_line("markers", "services: mark test as service layer test")
    config.addinivalue_line("markers", "repositories: mark test as repository test")
    config.addinivalue_line("markers", "appointment: mark test as appointment-related")
    config.addinivalue_line("markers", "ledger: mark test as cash ledger related")
    config.addinivalue_line("markers", "clients: mark test as client-related")
    config.addinivalue_line("markers", "settings: mark test as profile settings related")


def pytest_collection_modifyitems(config, items):
    """Modify test items during collection."""
    for item in items:
        path = str(item.fspath)

        if "unit" in path:
            item.add_marker(pytest.mark.unit)

        if "integration" in path:
            item.add_marker(pytest.mark.integration)

        if "auth" in path or "auth" in item.name:
            item.add_marker(pytest.mark.auth)

        if "controller" in path or "api" in path:
            item.add_marker(pytest.mark.controllers)
            item.add_marker(pytest.mark.api)

        if "service" in path:
            item.add_marker(pytest.mark.services)

        if "repo" in path:
            item.add_marker(pytest.mark.repositories)
            item.add_marker(pytest.mark.database)

        if "appointment" in path or "appointment" in item.name:
            item.add_marker(pytest.mark.appointment)

        if "transaction" in path or "period" in path:
            item.add_marker(pytest.mark.ledger)
