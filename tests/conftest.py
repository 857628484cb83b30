"""Pytest configuration for the isocurrency test suite.

Hypothesis profiles:
- dev: Local development, 300 examples
- ci: CI runs, 50 examples, derandomized
- verbose: Debug mode with progress output (100 examples)

Profile selection:
- HYPOTHESIS_PROFILE env var -> explicit override
- CI=true environment variable -> "ci"
- Otherwise -> "dev"

Tests marked @pytest.mark.fuzz sweep the whole code space and are skipped
unless requested with: pytest -m fuzz
"""

import os
from collections.abc import Iterator

import pytest
from hypothesis import Phase, Verbosity, settings

from isocurrency.constants import DEFAULT_CURRENCY_ENV_VAR

# =============================================================================
# HYPOTHESIS PROFILES
# =============================================================================

_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]

settings.register_profile("dev", max_examples=300, phases=_PHASES, derandomize=False)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=_PHASES,
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=_PHASES,
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Pick the Hypothesis profile for the current environment."""
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture(autouse=True, scope="session")
def _clean_default_currency() -> Iterator[None]:
    """Isolate tests from a default currency set in the developer's shell."""
    with pytest.MonkeyPatch.context() as mp:
        mp.delenv(DEFAULT_CURRENCY_ENV_VAR, raising=False)
        yield


# =============================================================================
# FUZZING TEST SEPARATION
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'fuzz' marker."""
    config.addinivalue_line(
        "markers",
        "fuzz: Exhaustive property sweeps (excluded from normal test runs)",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless selected with -m fuzz."""
    marker_expr = config.getoption("-m", default="")
    if "fuzz" in str(marker_expr):
        return

    skip_fuzz = pytest.mark.skip(reason="Fuzzing test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)
