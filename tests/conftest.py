"""Test configuration for package."""

pytest_plugins = ["typed_expect.pytest_plugin", "pytester"]
