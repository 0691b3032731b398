import pytest

from cellkit.ui.themes import default_theme, tokyo_night_theme


@pytest.fixture
def theme():
    return default_theme()


@pytest.fixture
def tokyo():
    return tokyo_night_theme()
