"""
React Native App Icons

Generates the platform icon sets for a React Native project including:
- iOS AppIcon.appiconset images and Contents.json
- Android mipmap launcher icons (square and round)
- Play Store listing icon
- Project directory auto-detection
"""

__version__ = "1.0.0"
__all__ = [
    'generate_icons',
    'locate',
    'ProjectPaths',
    'IconRenderer',
]

from .generator import generate_icons
from .locator import locate, ProjectPaths
from .imaging import IconRenderer
