"""Shared fixtures for structidl tests."""

import pytest

from structidl.generator import parse


def pytest_configure(config):
    """Disable verbose output when running tests."""
    terminal = config.pluginmanager.getplugin("terminal")
    if terminal:
        terminal.TerminalReporter.showfspath = False


@pytest.fixture
def pet_structs():
    """The two-field ``Pet`` struct used throughout the renderer tests."""
    return parse(
        """
        type Pet struct {
            Name string
            Age  int
        }
        """
    )
