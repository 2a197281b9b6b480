"""
CLI Module

Command line interface for rn-app-icons providing:
- Input and platform validation
- Output directory preparation
- Icon generation with project auto-detection
"""

import sys
from pathlib import Path

import click
from rich.console import Console
from rich.panel import Panel
from rich.align import Align

from .env import env, APP_NAME, APP_VERSION
from .errors import InvalidPlatformError
from .generator import PLATFORM_CHOICES, clear_output_dir, generate_icons, validate_platform
from .logger import get_logger, set_log_level

logger = get_logger(__name__)
console = Console()


def print_header() -> None:
    """Print the tool banner"""
    header_content = f"[bold blue]🚀 React Native App Icons Generator[/bold blue]\n[dim]v{APP_VERSION}[/dim]"
    console.print(Panel(Align.center(header_content), border_style="blue", padding=(0, 2)))


@click.command(name=APP_NAME)
@click.option('--input', '-i', 'input_path', required=True,
              help='Path to the source image (PNG format recommended)')
@click.option('--output', '-o', 'output_path', default=lambda: env.default_output_dir,
              show_default='./app-icons', help='Output directory for generated icons')
@click.option('--platforms', '-p', default='both', show_default=True,
              help=f'Platforms to generate icons for ({", ".join(PLATFORM_CHOICES)})')
@click.option('--clear', '-c', is_flag=True, default=False,
              help='Clear the output directory before generating new icons')
@click.option('--no-detect', is_flag=True, default=False,
              help='Skip project auto-detection and always write to the output directory')
@click.option('--verbose', '-v', is_flag=True, default=False,
              help='Show debug output on the console')
@click.version_option(version=APP_VERSION, prog_name=APP_NAME)
@click.help_option('--help', '-h')
def main(input_path, output_path, platforms, clear, no_detect, verbose):
    """
    Generate app icons for React Native applications

    \b
    Examples:
      # iOS and Android icons, placed into the detected project
      rn-app-icons -i icon.png

      # Android only, written to a custom directory
      rn-app-icons -i icon.png -p android -o ./build/icons --no-detect
    """
    if verbose:
        set_log_level('DEBUG', 'console')

    print_header()

    if not Path(input_path).exists():
        logger.error(f"Error: Input file not found at {input_path}")
        sys.exit(1)

    try:
        validate_platform(platforms)
    except InvalidPlatformError as e:
        logger.error(f"Error: {e}")
        sys.exit(1)

    try:
        output_dir = Path(output_path)
        output_dir.mkdir(parents=True, exist_ok=True)

        if clear:
            logger.warning(f"Clearing output directory: {output_dir}")
            clear_output_dir(output_dir)

        result = generate_icons(
            input_path=input_path,
            output_path=output_dir,
            platforms=platforms,
            auto_detect=not no_detect,
        )
    except KeyboardInterrupt:
        logger.error("\n❌ Cancelled")
        sys.exit(1)
    except Exception as e:
        logger.error(f"\n❌ Error: {e}")
        logger.debug("Generation failed", exc_info=True)
        sys.exit(1)

    console.print(f"\n[green]✅ App icons generated successfully! ({result.count} files)[/green]")


if __name__ == '__main__':
    main()
