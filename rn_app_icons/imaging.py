"""
Image Rendering

Pillow wrapper that loads the source icon once and produces square
resized copies, optionally clipped to a circle.
"""

import os
from pathlib import Path
from typing import Union

from PIL import Image, ImageChops, ImageDraw, ImageOps, UnidentifiedImageError

from .errors import SourceImageError, IconGenerationError

PathLike = Union[str, Path]


class IconRenderer:
    """Renders square PNG icons from a single source image"""

    def __init__(self, source_path: PathLike):
        self.source_path = Path(source_path)
        if not self.source_path.exists():
            raise SourceImageError(f"Input file not found at {self.source_path}")

        try:
            with Image.open(self.source_path) as img:
                img.load()
                self.source = img.convert('RGBA')
        except (UnidentifiedImageError, OSError) as e:
            raise SourceImageError(f"Cannot read image {self.source_path}: {e}") from e

    def render(self, size: int, round_mask: bool = False) -> Image.Image:
        """
        Scale and centre-crop the source to size x size

        Args:
            size: Edge length in pixels
            round_mask: Make everything outside the inscribed circle transparent

        Returns:
            New RGBA image
        """
        resized = ImageOps.fit(self.source, (size, size), Image.Resampling.LANCZOS)
        if not round_mask:
            return resized

        mask = circle_mask(size)
        alpha = ImageChops.multiply(resized.getchannel('A'), mask)
        resized.putalpha(alpha)
        return resized

    def write(self, path: PathLike, size: int, round_mask: bool = False) -> Path:
        """Render and save as PNG, returning the written path"""
        return save_png(self.render(size, round_mask=round_mask), path)


def circle_mask(size: int) -> Image.Image:
    """8-bit mask with a filled circle of diameter size"""
    mask = Image.new('L', (size, size), 0)
    draw = ImageDraw.Draw(mask)
    draw.ellipse((0, 0, size - 1, size - 1), fill=255)
    return mask


def save_png(image: Image.Image, path: PathLike) -> Path:
    """Write image as PNG; a failed write leaves no file behind"""
    path = Path(path)
    try:
        with open(path, 'wb') as f:
            image.save(f, format='PNG')
            f.flush()
            os.fsync(f.fileno())
    except OSError as e:
        path.unlink(missing_ok=True)
        raise IconGenerationError(f"Failed to write {path}: {e}") from e
    return path
