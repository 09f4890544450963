"""
Pytest fixtures for Pearls tests.
"""

import pytest

from pearls.game import PearlsGame, get_level


@pytest.fixture
def portal_row() -> PearlsGame:
    """Player, portal (+2), empty, portal (-2), wall."""
    return PearlsGame(["p1.1#"])


@pytest.fixture
def boxed_in() -> PearlsGame:
    """Player surrounded by walls on all four sides."""
    return PearlsGame([
        "###",
        "#p#",
        "###",
    ])


@pytest.fixture
def first_steps() -> PearlsGame:
    return PearlsGame(get_level("first_steps"))
