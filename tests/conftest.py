import pytest


def _is_connection_psql():
    from django.db import connection
    return connection.vendor == "postgresql"


def pytest_collection_modifyitems(config, items):
    skip_pg = pytest.mark.skip(reason="connection is not a postgres database")
    if not _is_connection_psql():
        for item in items:
            if "postgres" in item.keywords:
                item.add_marker(skip_pg)
