# tests/conftest.py
import sys
import pytest
from pathlib import Path
from unittest.mock import Mock

def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "integration: marks tests as integration tests")

# Add the project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from config.config_manager import PublishingConfig
from haikupress.publishing.notices import NoticeStore


@pytest.fixture(scope="session")
def project_root_path():
    """Return the project root path"""
    return Path(__file__).parent.parent

@pytest.fixture
def basho_haiku():
    """Classic haiku that the estimator scores 5-7-5"""
    return "An old silent pond\nA frog jumps into the pond\nSplash! Silence again."

@pytest.fixture
def basho_block_markup():
    """The same haiku as saved by a block editor"""
    return (
        '<!-- wp:paragraph -->\n<p>An old silent pond</p>\n<!-- /wp:paragraph -->\n\n'
        '<!-- wp:paragraph -->\n<p>A frog jumps into the pond</p>\n<!-- /wp:paragraph -->\n\n'
        '<!-- wp:paragraph -->\n<p>Splash! Silence again.</p>\n<!-- /wp:paragraph -->'
    )

@pytest.fixture
def fake_clock():
    """Controllable monotonic clock: advance with fake_clock.now += seconds"""
    clock = Mock()
    clock.now = 1000.0
    clock.side_effect = lambda: clock.now
    return clock

@pytest.fixture
def notice_store(fake_clock):
    return NoticeStore(clock=fake_clock)

@pytest.fixture
def publishing_config():
    return PublishingConfig(post_types=["post"], notice_ttl=60, notice_key="haikupress_admin_notice")
