"""Shared fixtures for showcase tests."""

import pytest

import showcase

HUCK_FINN = (
    "It was after sun-up now, but we went right on and didn't tie up. "
    "The king and the duke turned out by and by looking pretty rusty "
    "but after they had jumped overboard and took a swim it chippered "
    "them up a good deal. After breakfast the king he took a seat on "
    "the corner of the raft and pulled off his boots and rolled up his "
    "britches and let his legs dangle in the water so as to be "
    "comfortable and lit his pipe and went to getting his Romeo and "
    "Juliet by heart."
)


@pytest.fixture(scope="session")
def grid():
    """A 16x16 grid already in Z-order."""
    return showcase.z_order_traversal(16, 16)


@pytest.fixture
def huck_finn():
    return HUCK_FINN
