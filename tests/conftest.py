"""
Pytest configuration for numfunc tests.

Provides:
- Hypothesis profiles ("default", "ci"), selected by HYPOTHESIS_PROFILE
- A clean op registry for every test
"""

import os
import pytest

from numfunc.op_registry import clear_registry

# =============================================================================
# Hypothesis Configuration
# =============================================================================
# print_blob=True makes failures easy to reproduce.
# Omitting database= keeps the default .hypothesis/ example cache.

try:
    from hypothesis import settings

    settings.register_profile(
        "default",
        print_blob=True,
        derandomize=False,
    )

    settings.register_profile(
        "ci",
        print_blob=True,
        derandomize=True,
        max_examples=200,
    )

    profile = os.environ.get("HYPOTHESIS_PROFILE", "default")
    settings.load_profile(profile)

except ImportError:
    pass  # hypothesis not installed, skip configuration


@pytest.fixture(autouse=True)
def _fresh_registry():
    """Each test starts from the lazily seeded built-ins."""
    clear_registry()
    yield
    clear_registry()
