"""
Project Locator

Finds where a React Native project keeps its icons:
- iOS: ios/<App>/Images.xcassets/AppIcon.appiconset
- Android: android/app/src/main/res

Every lookup is advisory. A missing directory leaves that destination unset
and is reported as a warning; it never stops generation.
"""

import os
from enum import Enum
from pathlib import Path
from dataclasses import dataclass
from typing import Optional, Union

from .env import env
from .logger import get_logger

logger = get_logger(__name__)

IOS_DIR = 'ios'
ANDROID_DIR = 'android'
XCODEPROJ_SUFFIX = '.xcodeproj'
ASSETS_DIR = 'Images.xcassets'
APPICON_DIR = 'AppIcon.appiconset'
ANDROID_RES_PARTS = ('app', 'src', 'main', 'res')


@dataclass(frozen=True)
class ProjectPaths:
    """Destinations detected for one invocation"""
    ios: Optional[Path] = None
    android: Optional[Path] = None
    app_name: Optional[str] = None

    @property
    def resolved(self) -> bool:
        return self.ios is not None or self.android is not None


class DetectionStatus(Enum):
    FOUND = 'found'
    NOT_FOUND = 'not_found'
    UNEXPECTED = 'unexpected'


@dataclass(frozen=True)
class DetectionResult:
    """Outcome of looking for one platform directory"""
    status: DetectionStatus
    path: Optional[Path] = None
    message: str = ''
    app_name: Optional[str] = None
    error: Optional[OSError] = None

    @classmethod
    def found(cls, path: Path, message: str, app_name: Optional[str] = None) -> 'DetectionResult':
        return cls(DetectionStatus.FOUND, path=path, message=message, app_name=app_name)

    @classmethod
    def not_found(cls, message: str, app_name: Optional[str] = None) -> 'DetectionResult':
        return cls(DetectionStatus.NOT_FOUND, message=message, app_name=app_name)

    @classmethod
    def unexpected(cls, message: str, error: OSError) -> 'DetectionResult':
        return cls(DetectionStatus.UNEXPECTED, message=message, error=error)

    def report(self) -> None:
        if self.status is DetectionStatus.FOUND:
            logger.info(f"✓ {self.message}")
        elif self.status is DetectionStatus.NOT_FOUND:
            logger.warning(f"⚠ {self.message}")
        else:
            logger.error(f"❌ {self.message}: {self.error}")


def find_ios_project(root: Path) -> DetectionResult:
    """Look for the AppIcon.appiconset of the Xcode project under root"""
    ios_dir = root / IOS_DIR
    if not ios_dir.is_dir():
        return DetectionResult.not_found('No iOS directory found')

    try:
        entries = sorted(os.listdir(ios_dir))
    except OSError as e:
        return DetectionResult.unexpected(f'Could not read iOS directory {ios_dir}', e)

    xcodeproj = next((name for name in entries if name.endswith(XCODEPROJ_SUFFIX)), None)
    if xcodeproj is None:
        return DetectionResult.not_found(f'iOS directory found but no {XCODEPROJ_SUFFIX} file')

    app_name = xcodeproj[:-len(XCODEPROJ_SUFFIX)]
    assets_dir = ios_dir / app_name / ASSETS_DIR
    if not assets_dir.is_dir():
        return DetectionResult.not_found(
            f'iOS project found but no {ASSETS_DIR} directory in {app_name}',
            app_name=app_name
        )

    appicon_dir = assets_dir / APPICON_DIR
    try:
        appicon_dir.mkdir(exist_ok=True)
    except OSError as e:
        return DetectionResult.unexpected(f'Could not create {appicon_dir}', e)

    return DetectionResult.found(appicon_dir, f'Found iOS project: {app_name}', app_name=app_name)


def find_android_project(root: Path) -> DetectionResult:
    """Look for the res directory of the Android app module under root"""
    android_dir = root / ANDROID_DIR
    res_dir = android_dir.joinpath(*ANDROID_RES_PARTS)

    if res_dir.is_dir():
        return DetectionResult.found(res_dir, 'Found Android project')
    if android_dir.is_dir():
        return DetectionResult.not_found('Android directory found but no res directory')
    return DetectionResult.not_found('No Android directory found')


def _detect(root: Path) -> ProjectPaths:
    ios = find_ios_project(root)
    ios.report()
    android = find_android_project(root)
    android.report()

    return ProjectPaths(
        ios=ios.path if ios.status is DetectionStatus.FOUND else None,
        android=android.path if android.status is DetectionStatus.FOUND else None,
        app_name=ios.app_name,
    )


def _has_project_dir(path: Path) -> bool:
    return (path / IOS_DIR).is_dir() or (path / ANDROID_DIR).is_dir()


def locate(search_root: Optional[Union[str, Path]] = None,
           parent_depth: Optional[int] = None) -> ProjectPaths:
    """
    Detect iOS and Android icon destinations

    Args:
        search_root: Directory to start from (defaults to the working directory)
        parent_depth: Ancestors to try when nothing is found at search_root
                      (defaults to the configured depth, 3)

    Returns:
        ProjectPaths with unset fields for anything not found
    """
    root = Path(search_root) if search_root is not None else Path.cwd()
    root = root.resolve()
    depth = env.parent_search_depth if parent_depth is None else parent_depth

    logger.info('\nScanning project structure...')
    result = _detect(root)
    if result.resolved:
        return result

    for level, ancestor in enumerate(root.parents, 1):
        if level > depth:
            break
        if _has_project_dir(ancestor):
            logger.info(f'Found project directories in parent: {ancestor}')
            return _detect(ancestor)

    logger.debug(f'No project directories within {depth} parent levels of {root}')
    return result
