import pytest

from chromapick.colors import Color
from chromapick.session import ColorSession


@pytest.fixture
def cyan() -> Color:
    return Color.from_hsl(180, 100, 50)


@pytest.fixture
def session() -> ColorSession:
    return ColorSession()
