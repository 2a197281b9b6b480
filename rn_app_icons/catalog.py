"""
Icon Size Catalog

Fixed size tables for the iOS AppIcon set and the Android launcher icons.
"""

import math
from dataclasses import dataclass
from typing import Iterator, Tuple, Union

Number = Union[int, float]


@dataclass(frozen=True)
class IosIconSize:
    """Point size and the scale factors Xcode expects for it"""
    size: Number
    scales: Tuple[int, ...]


@dataclass(frozen=True)
class AndroidIconSize:
    """Density bucket name and its pixel size"""
    name: str
    size: int


IOS_ICON_SIZES: Tuple[IosIconSize, ...] = (
    IosIconSize(20, (1, 2, 3)),    # Notification
    IosIconSize(29, (1, 2, 3)),    # Settings
    IosIconSize(40, (1, 2, 3)),    # Spotlight
    IosIconSize(60, (2, 3)),       # iPhone app
    IosIconSize(76, (1, 2)),       # iPad app
    IosIconSize(83.5, (2,)),       # iPad Pro app
    IosIconSize(1024, (1,)),       # App Store
)

PLAYSTORE_BUCKET = 'playstore'

ANDROID_ICON_SIZES: Tuple[AndroidIconSize, ...] = (
    AndroidIconSize('mipmap-mdpi', 48),
    AndroidIconSize('mipmap-hdpi', 72),
    AndroidIconSize('mipmap-xhdpi', 96),
    AndroidIconSize('mipmap-xxhdpi', 144),
    AndroidIconSize('mipmap-xxxhdpi', 192),
    AndroidIconSize(PLAYSTORE_BUCKET, 512),  # Google Play Store
)

IPAD_SIZES = (76, 83.5)
MARKETING_SIZE = 1024


def iter_ios_variants() -> Iterator[Tuple[Number, int]]:
    """Yield every (size, scale) pair in catalog order"""
    for entry in IOS_ICON_SIZES:
        for scale in entry.scales:
            yield entry.size, scale


def pixel_size(size: Number, scale: int) -> int:
    """Rounded pixel edge for a point size at a scale, halves rounding up"""
    return int(math.floor(size * scale + 0.5))


def format_size(size: Number) -> str:
    """'20' for integral sizes, '83.5' otherwise"""
    if float(size).is_integer():
        return str(int(size))
    return str(size)


def ios_filename(size: Number, scale: int) -> str:
    label = format_size(size)
    return f'icon-{label}x{label}@{scale}x.png'


def ios_idiom(size: Number) -> str:
    if size == MARKETING_SIZE:
        return 'ios-marketing'
    if size in IPAD_SIZES:
        return 'ipad'
    return 'iphone'
