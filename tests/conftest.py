"""Pytest configuration and shared fixtures for the bbhtml test suite.

This module provides shared fixtures, test configuration, and the Hypothesis
profiles used by the property-based tests.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from bbhtml.schema import build_default_registry

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=50)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "security: Tests of escaping and attribute validation")
    config.addinivalue_line("markers", "fuzzing: Property-based tests using Hypothesis")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture(scope="session")
def registry():
    """Provide the built-in tag registry.

    The registry is immutable, so one instance is shared by the whole session.
    """
    return build_default_registry()


@pytest.fixture
def sample_post() -> str:
    """Provide a forum post exercising most built-in tags."""
    return (
        "[quote=Alice]Has anyone tried the new release?[/quote]\n"
        "Yes! [b]It works[/b] with [i]most[/i] setups.\n"
        "[list]\n"
        "[*]Fast\n"
        "[*][color=#00FF00]Stable[/color]\n"
        "[/list]\n"
        "[code=python]print('[b]')[/code]\n"
        "See [url=https://example.com/docs]the docs[/url]."
    )
