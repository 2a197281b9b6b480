"""Exceptions raised by rn-app-icons"""


class AppIconsError(Exception):
    """Base class for icon generation errors"""
    pass


class InvalidPlatformError(AppIconsError):
    """Platform selector is not one of ios, android or both"""

    def __init__(self, platform: str, choices):
        self.platform = platform
        self.choices = tuple(choices)
        super().__init__(
            f'Invalid platform "{platform}". Use {", ".join(self.choices[:-1])}, or {self.choices[-1]}'
        )


class SourceImageError(AppIconsError):
    """Source image is missing or cannot be decoded"""
    pass


class IconGenerationError(AppIconsError):
    """An icon could not be written"""
    pass
