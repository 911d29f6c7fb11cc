"""
Pytest configuration for ycomb_pi tests.

Provides:
- Call coverage reporting (enable with YCOMB_CALL_COVERAGE=1)
- Hypothesis configuration for deterministic fuzzing
- A registry fixture that leaves the program registry clean
"""

import os
import pytest

from ycomb_pi import call_coverage
from ycomb_pi.program_registry import clear_registry

# =============================================================================
# Hypothesis Configuration
# =============================================================================
# Church arithmetic is slow on purpose; keep deadlines off so a cold run of
# fibonacci does not trip Hypothesis' timing checks.

try:
    from hypothesis import settings, HealthCheck

    settings.register_profile(
        "default",
        print_blob=True,
        deadline=None,
    )

    settings.register_profile(
        "ci",
        print_blob=True,
        deadline=None,
        derandomize=True,
        suppress_health_check=[HealthCheck.too_slow],
    )

    # Load profile from HYPOTHESIS_PROFILE env var, default to "default"
    settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "default"))

except ImportError:
    pass  # hypothesis not installed, skip configuration


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def clean_registry():
    clear_registry()
    yield
    clear_registry()


@pytest.fixture
def counting():
    """Enable call counting for one test, restoring the previous state after."""
    was_enabled = call_coverage.is_enabled()
    call_coverage.reset()
    call_coverage.enable()
    yield call_coverage
    call_coverage.reset()
    if not was_enabled:
        call_coverage.disable()


def pytest_configure(config):
    """Enable call coverage if YCOMB_CALL_COVERAGE is set."""
    if os.environ.get("YCOMB_CALL_COVERAGE") == "1":
        call_coverage.enable()
        call_coverage.reset()


def pytest_unconfigure(config):
    """Print call coverage report at end of test run."""
    if os.environ.get("YCOMB_CALL_COVERAGE") == "1":
        print("\n")
        print(call_coverage.report())
