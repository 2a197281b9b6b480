"""Test configuration and fixtures for rn-app-icons test suite"""

import sys
import logging
from io import StringIO
from pathlib import Path

import pytest
from PIL import Image

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from rn_app_icons import emitter


@pytest.fixture
def project_root():
    """Fixture providing path to project root directory"""
    return PROJECT_ROOT


@pytest.fixture
def source_image(tmp_path):
    """Opaque 256x256 PNG with a horizontal gradient"""
    path = tmp_path / 'source' / 'icon.png'
    path.parent.mkdir()
    image = Image.new('RGBA', (256, 256))
    image.putdata([(x, 255 - x, 128, 255) for y in range(256) for x in range(256)])
    image.save(path)
    return path


@pytest.fixture
def jpeg_source(tmp_path):
    """Opaque JPEG source, to check non-PNG input"""
    path = tmp_path / 'source' / 'icon.jpg'
    path.parent.mkdir(exist_ok=True)
    Image.new('RGB', (300, 300), (200, 40, 40)).save(path, format='JPEG')
    return path


@pytest.fixture
def rn_project(tmp_path):
    """React Native layout with an Xcode project and an Android res directory"""
    root = tmp_path / 'MyApp'
    (root / 'ios' / 'MyApp.xcodeproj').mkdir(parents=True)
    (root / 'ios' / 'MyApp' / 'Images.xcassets').mkdir(parents=True)
    (root / 'android' / 'app' / 'src' / 'main' / 'res').mkdir(parents=True)
    return root


class ProgressCapture:
    """Collects the lines logged by the emitter"""

    def __init__(self):
        self.stream = StringIO()
        self.handler = logging.StreamHandler(self.stream)
        self.handler.setLevel(logging.INFO)

    @property
    def lines(self):
        return [line for line in self.stream.getvalue().splitlines() if 'Generated:' in line]


@pytest.fixture
def capture_progress():
    """Capture the emitter's progress lines"""
    capture = ProgressCapture()
    emitter.logger.addHandler(capture.handler)

    yield capture

    emitter.logger.removeHandler(capture.handler)


# Pytest hooks for better test organization
def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "slow: Slow running tests")


def pytest_collection_modifyitems(config, items):
    """Add markers based on test file location"""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
