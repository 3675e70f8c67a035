"""Shared pytest configuration for envtree tests."""

pytest_plugins = ["envtree.testing.pytest_fixtures"]
