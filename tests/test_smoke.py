"""Smoke tests — verify the package is wired up correctly.

These tests ensure that:
1. All modules can be imported without errors
2. Configuration loads with default values
3. The console entry point exists

This is the first thing CI runs, so if these fail, nothing else will work.
"""

import os

import pytest


def test_imports() -> None:
    """Verify all modules can be imported without crashing."""
    import avni_mcp  # noqa: F401
    import avni_mcp.avni_client  # noqa: F401
    import avni_mcp.config  # noqa: F401
    import avni_mcp.langchain_tools  # noqa: F401
    import avni_mcp.naming  # noqa: F401
    import avni_mcp.records  # noqa: F401
    import avni_mcp.server  # noqa: F401
    import avni_mcp.tools  # noqa: F401
    import avni_mcp.tools.app_designer  # noqa: F401
    import avni_mcp.tools.locations  # noqa: F401
    import avni_mcp.tools.organisation  # noqa: F401
    import avni_mcp.tools.registry  # noqa: F401
    import avni_mcp.tools.users  # noqa: F401


@pytest.mark.skipif(
    "AVNI_BASE_URL" in os.environ or "AVNI_ENVIRONMENT" in os.environ,
    reason="Avni URL overridden in the environment",
)
def test_config_defaults() -> None:
    """Config should default to the staging server."""
    from avni_mcp.config import AVNI_BASE_URL, AVNI_STAGING_URL

    assert AVNI_BASE_URL == AVNI_STAGING_URL == "https://staging.avniproject.org"


def test_main_is_callable() -> None:
    from avni_mcp.server import main

    assert callable(main)
