"""Shared pytest configuration for twlocale.

Hypothesis profiles (max_examples is set only here):
- dev: 300 examples, the default on a workstation
- ci: 50 derandomized examples, chosen when CI=true
- verbose: 100 examples with progress output

HYPOTHESIS_PROFILE overrides the automatic choice, e.g.
``HYPOTHESIS_PROFILE=verbose pytest tests/``.

Tests under tests/fuzz are marked ``fuzz`` and only run with ``pytest -m fuzz``.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from twlocale.runtime.locale_context import LocaleContext

# =============================================================================
# HYPOTHESIS PROFILES
# =============================================================================

_ALL_PHASES = (Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink)

_PROFILES: dict[str, dict[str, object]] = {
    "dev": {"max_examples": 300},
    "ci": {"max_examples": 50, "derandomize": True, "print_blob": True},
    "verbose": {"max_examples": 100, "verbosity": Verbosity.verbose},
}

for _name, _options in _PROFILES.items():
    settings.register_profile(_name, phases=_ALL_PHASES, **_options)  # type: ignore[arg-type]


def _detect_profile() -> str:
    """HYPOTHESIS_PROFILE if it names a profile, else ci under CI, else dev."""
    requested = os.environ.get("HYPOTHESIS_PROFILE", "")
    if requested in _PROFILES:
        return requested
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_detect_profile())

# =============================================================================
# FUZZ MARKER
# =============================================================================


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip fuzz tests unless the ``-m`` expression mentions fuzz."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return
    skip_fuzz = pytest.mark.skip(reason="fuzz test; run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture(autouse=True)
def _fresh_locale_cache() -> None:
    """Start every test with an empty LocaleContext cache."""
    LocaleContext.clear_cache()
