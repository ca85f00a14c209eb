"""
Pytest Configuration and Shared Fixtures
"""

import pytest
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from debuget.core import ReportComposer, Reporter, Theme, ThemeStore
from tests.mocks.mock_collaborators import RecordingSink, StaticStackResolver, make_frames


@pytest.fixture
def theme_store():
    """Fresh theme store with default settings"""
    return ThemeStore()


@pytest.fixture
def plain_theme():
    """Theme without colors, so rendered text can be matched literally"""
    return Theme(colors=False)


@pytest.fixture
def frames():
    """Ten frames, two of them inside installed packages"""
    return make_frames(10, third_party=(1, 4))


@pytest.fixture
def resolver(frames):
    return StaticStackResolver(frames)


@pytest.fixture
def composer(theme_store, resolver):
    return ReportComposer(theme_store=theme_store, resolver=resolver)


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def reporter(composer, sink):
    return Reporter(composer=composer, sink=sink)
