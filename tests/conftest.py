"""Pytest configuration and shared fixtures."""

import os

import pytest
from hypothesis import Verbosity, settings

# Configure Hypothesis profiles
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)

# Load profile from environment or default to "dev"
profile = os.environ.get("HYPOTHESIS_PROFILE", "dev")
settings.load_profile(profile)


@pytest.fixture
def restore_threshold():
    """Undo any threshold change a test makes."""
    from biguint import get_karatsuba_threshold, set_karatsuba_threshold

    previous = get_karatsuba_threshold()
    yield
    set_karatsuba_threshold(previous)


@pytest.fixture
def zero():
    """Provide a fresh zero."""
    from biguint import BigUint

    return BigUint()


@pytest.fixture
def sample_numbers():
    """Provide a set of interesting non-negative ints."""
    return [
        0,
        1,
        2,
        9,
        10,
        2**32 - 1,
        2**32,
        2**32 + 1,
        2**64 - 1,
        2**64,
        10**20,
        2**96 - 1,
        3**200,
        10**100 + 7,
    ]
