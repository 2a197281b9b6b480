"""
Icon Generation Orchestrator

Runs project detection and then the iOS and Android emitters, one after
the other.
"""

import shutil
from pathlib import Path
from dataclasses import dataclass, field
from typing import List, Optional, Union

from .emitter import GeneratedFile, generate_ios_icons, generate_android_icons
from .errors import InvalidPlatformError, SourceImageError
from .imaging import IconRenderer
from .locator import ProjectPaths, locate
from .logger import get_logger

logger = get_logger(__name__)

PathLike = Union[str, Path]

PLATFORM_CHOICES = ('ios', 'android', 'both')


@dataclass
class GenerationResult:
    """Everything one run produced"""
    project_paths: ProjectPaths
    files: List[GeneratedFile] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.files)


def validate_platform(platforms: str) -> str:
    if platforms not in PLATFORM_CHOICES:
        raise InvalidPlatformError(platforms, PLATFORM_CHOICES)
    return platforms


def includes_ios(platforms: str) -> bool:
    return platforms in ('ios', 'both')


def includes_android(platforms: str) -> bool:
    return platforms in ('android', 'both')


def clear_output_dir(path: PathLike) -> None:
    """Remove everything inside path, keeping path itself"""
    path = Path(path)
    if not path.exists():
        return
    for child in path.iterdir():
        if child.is_dir() and not child.is_symlink():
            shutil.rmtree(child)
        else:
            child.unlink()


def generate_icons(input_path: PathLike, output_path: PathLike,
                   platforms: str = 'both', auto_detect: bool = True,
                   search_root: Optional[PathLike] = None) -> GenerationResult:
    """
    Generate app icons for the selected platforms

    Args:
        input_path: Source image
        output_path: Staging directory for anything without a detected project
        platforms: 'ios', 'android' or 'both'
        auto_detect: Look for the project's icon directories first
        search_root: Where detection starts (working directory by default)

    Returns:
        GenerationResult with the detected paths and every generated file
    """
    validate_platform(platforms)
    if not Path(input_path).exists():
        raise SourceImageError(f"Input file not found at {input_path}")

    # Source must decode before detection may create AppIcon.appiconset
    renderer = IconRenderer(input_path)
    project_paths = locate(search_root) if auto_detect else ProjectPaths()
    result = GenerationResult(project_paths=project_paths)

    if includes_ios(platforms):
        result.files.extend(generate_ios_icons(
            input_path, output_path, project_paths.ios, renderer=renderer
        ))

    if includes_android(platforms):
        result.files.extend(generate_android_icons(
            input_path, output_path, project_paths.android, renderer=renderer
        ))

    logger.info('\nIcon generation complete!')
    return result
