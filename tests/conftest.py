"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from typekit import typedef


def _shape_init(this, uid=0):
    this.uid = uid


@pytest.fixture
def shape_cls():
    """Fresh `Shape` constructor with an instance method and a static counter."""
    return (
        typedef(_shape_init)
        .implements(
            {
                "count": {"static": 0, "writable": True},
                "get_uid": lambda this: this.uid,
            }
        )
        .identity
    )


@pytest.fixture
def empty_cls():
    """Fresh constructor with no initializer and no members."""

    def Empty(this):
        pass

    return typedef(Empty).identity
