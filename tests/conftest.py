# Shared element fixtures for the contrast tests. Elements are plain
# attribute holders shaped like DOM nodes (element.style.color, ...).

from types import SimpleNamespace

import pytest


def make_element(color=None, backgroundColor=None):
    return SimpleNamespace(style=SimpleNamespace(color=color, backgroundColor=backgroundColor))


@pytest.fixture
def element_factory():
    return make_element


@pytest.fixture
def white_swatch():
    # Text and background both live on the same element
    return make_element(color="#000000", backgroundColor="#ffffff")
