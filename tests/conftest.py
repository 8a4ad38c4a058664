from __future__ import annotations

import pytest

from linked_bag import LinkedBag
from resizeable_array_bag import ResizeableArrayBag


@pytest.fixture(params=[LinkedBag, ResizeableArrayBag], ids=["linked", "array"])
def bag_class(request):
    """Each test using this fixture runs once per bag implementation."""
    return request.param


@pytest.fixture
def make_bag(bag_class):
    """Returns a function building a bag of the current implementation from a list."""

    def _make(entries=()):
        bag = bag_class()
        for entry in entries:
            bag.add(entry)
        return bag

    return _make
