"""
pytest plugin providing the ``expect`` fixture.

Enable it with ``-p typed_expect.pytest_plugin`` or from a top-level conftest:

    pytest_plugins = ["typed_expect.pytest_plugin"]

Reporting is configured through ini options:

    [tool.pytest.ini_options]
    expect_color = false
    expect_full_path = true
"""

import pytest

from .config import ExpectConfig
from .expect import Expect


def pytest_addoption(parser: pytest.Parser) -> None:  # noqa: D103
    parser.addini(
        'expect_color', type='bool', default=True,
        help="Wrap typed-expect failure messages in ANSI red.",
    )
    parser.addini(
        'expect_full_path', type='bool', default=False,
        help="Report the full path of the failing file instead of its basename.",
    )


@pytest.fixture
def expect_config(pytestconfig: pytest.Config) -> ExpectConfig:
    """Reporting configuration built from the ini options."""
    return ExpectConfig(
        color=pytestconfig.getini('expect_color'),
        full_path=pytestconfig.getini('expect_full_path'),
    )


@pytest.fixture
def expect(expect_config: ExpectConfig) -> Expect:
    """An ``Expect`` bound to the current test."""
    return Expect(expect_config)
