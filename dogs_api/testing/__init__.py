"""Test harness: isolated app + database per suite, table clearing between tests."""
from .app import TestApp, create_test_app
from .tables import clear_all_tables

__all__ = ["TestApp", "create_test_app", "clear_all_tables"]
