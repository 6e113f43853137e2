"""Shared pytest configuration for the catalog test suite."""

from tests.fixtures import *  # noqa: F401,F403
