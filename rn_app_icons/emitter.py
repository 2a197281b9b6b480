"""
Icon Emitter

Writes the iOS and Android icon sets for one source image. Every written
file produces one progress line.
"""

import json
from pathlib import Path
from dataclasses import dataclass
from typing import Dict, List, Optional, Union, Any

from .catalog import (
    ANDROID_ICON_SIZES, PLAYSTORE_BUCKET,
    iter_ios_variants, pixel_size, format_size, ios_filename, ios_idiom,
)
from .env import env
from .imaging import IconRenderer, save_png
from .logger import get_logger

logger = get_logger(__name__)

PathLike = Union[str, Path]

CONTENTS_JSON = 'Contents.json'
LAUNCHER_ICON = 'ic_launcher.png'
LAUNCHER_ROUND_ICON = 'ic_launcher_round.png'
PLAYSTORE_ICON = 'playstore-icon.png'


@dataclass(frozen=True)
class GeneratedFile:
    """A file written by the emitter"""
    path: Path
    label: str
    width: Optional[int] = None
    height: Optional[int] = None


def _report(generated: GeneratedFile) -> GeneratedFile:
    if generated.width is None:
        logger.info(f"✓ Generated: {generated.label}")
    else:
        logger.info(f"✓ Generated: {generated.label} ({generated.width}x{generated.height}px)")
    return generated


def _write_icon(renderer: IconRenderer, path: Path, label: str, size: int,
                round_mask: bool = False) -> GeneratedFile:
    renderer.write(path, size, round_mask=round_mask)
    return _report(GeneratedFile(path=path, label=label, width=size, height=size))


def build_contents_json(author: Optional[str] = None) -> Dict[str, Any]:
    """Xcode AppIcon.appiconset manifest for the full iOS catalog"""
    images = []
    for size, scale in iter_ios_variants():
        label = format_size(size)
        images.append({
            'size': f'{label}x{label}',
            'idiom': ios_idiom(size),
            'filename': ios_filename(size, scale),
            'scale': f'{scale}x',
        })

    return {
        'images': images,
        'info': {
            'version': 1,
            'author': author or env.manifest_author,
        },
    }


def write_contents_json(directory: PathLike, author: Optional[str] = None) -> GeneratedFile:
    path = Path(directory) / CONTENTS_JSON
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(build_contents_json(author), f, indent=2)
    return _report(GeneratedFile(path=path, label=CONTENTS_JSON))


def generate_ios_icons(input_path: PathLike, output_path: PathLike,
                       ios_project_path: Optional[PathLike] = None,
                       renderer: Optional[IconRenderer] = None,
                       author: Optional[str] = None) -> List[GeneratedFile]:
    """
    Generate the iOS AppIcon set

    Args:
        input_path: Source image
        output_path: Root of the staging directory
        ios_project_path: Detected AppIcon.appiconset directory, if any
        renderer: Renderer to reuse (created from input_path otherwise)
        author: Contents.json author tag

    Returns:
        Generated files in write order, Contents.json last
    """
    staging_dir = Path(output_path) / 'ios'
    target_dir = Path(ios_project_path) if ios_project_path else staging_dir
    target_dir.mkdir(parents=True, exist_ok=True)
    renderer = renderer or IconRenderer(input_path)

    logger.info('\nGenerating iOS icons...')

    generated = []
    for size, scale in iter_ios_variants():
        filename = ios_filename(size, scale)
        generated.append(
            _write_icon(renderer, target_dir / filename, filename, pixel_size(size, scale))
        )

    generated.append(write_contents_json(target_dir, author))

    if ios_project_path:
        logger.info(f"✓ Icons placed in iOS project: {target_dir}")
    else:
        logger.warning(f"⚠ Icons generated in temporary directory: {staging_dir}")
        logger.warning("  To use these icons, copy the contents to your iOS project's AppIcon.appiconset directory")

    return generated


def generate_android_icons(input_path: PathLike, output_path: PathLike,
                           android_project_path: Optional[PathLike] = None,
                           renderer: Optional[IconRenderer] = None) -> List[GeneratedFile]:
    """
    Generate Android launcher icons and the Play Store icon

    Density buckets go to the detected res directory when there is one.
    The Play Store icon always goes to <output_path>/android.
    """
    staging_dir = Path(output_path) / 'android'
    target_dir = Path(android_project_path) if android_project_path else staging_dir
    renderer = renderer or IconRenderer(input_path)

    logger.info('\nGenerating Android icons...')

    generated = []
    for bucket in ANDROID_ICON_SIZES:
        if bucket.name == PLAYSTORE_BUCKET:
            staging_dir.mkdir(parents=True, exist_ok=True)
            generated.append(
                _write_icon(renderer, staging_dir / PLAYSTORE_ICON, PLAYSTORE_ICON, bucket.size)
            )
            continue

        bucket_dir = target_dir / bucket.name
        bucket_dir.mkdir(parents=True, exist_ok=True)
        generated.append(_write_icon(
            renderer, bucket_dir / LAUNCHER_ICON,
            f'{bucket.name}/{LAUNCHER_ICON}', bucket.size
        ))
        generated.append(_write_icon(
            renderer, bucket_dir / LAUNCHER_ROUND_ICON,
            f'{bucket.name}/{LAUNCHER_ROUND_ICON}', bucket.size, round_mask=True
        ))

    if android_project_path:
        logger.info(f"✓ Icons placed in Android project: {target_dir}")
    else:
        logger.warning(f"⚠ Icons generated in temporary directory: {staging_dir}")
        logger.warning("  To use these icons, copy the mipmap-* directories to your Android project's res directory")

    return generated
