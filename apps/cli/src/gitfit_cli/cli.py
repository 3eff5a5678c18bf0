"""CLI for compressing an image under a byte budget."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from gitfit_compressor import compress_file
from gitfit_shared.errors import GitfitError, UnsupportedFormat
from gitfit_shared.files import DEFAULT_MAX_SIZE, DEFAULT_QUALITY

from .config import CompressOptions, UsageError

logger = logging.getLogger(__name__)


@click.command()
@click.option("-i", "--input", "input_path", type=click.Path(path_type=Path), help="Path to the input image file")
@click.option("-o", "--output", "output_path", type=click.Path(path_type=Path), help="Path to save the compressed image")
@click.option("-m", "--maxsize", "max_size", default=DEFAULT_MAX_SIZE, type=int, show_default=True,
              help="Maximum file size in bytes")
@click.option("-f", "--format", "format_name", default=None,
              help="Output image format (jpeg, png, or gif); inferred from the input when omitted")
@click.option("-q", "--quality", default=DEFAULT_QUALITY, type=int, show_default=True,
              help="JPEG compression quality (1-100)")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging")
@click.pass_context
def cli(ctx: click.Context, input_path: Path | None, output_path: Path | None, max_size: int,
        format_name: str | None, quality: int, verbose: bool) -> None:
    """Compress an image so it fits under a maximum file size."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    if input_path is None and output_path is None:
        click.echo(ctx.get_help())
        ctx.exit(1)

    try:
        options = CompressOptions.resolve(input_path, output_path, max_size, format_name, quality)
    except (UsageError, UnsupportedFormat) as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    logger.debug(
        "Input file: %s, output file: %s, maximum size: %d, output format: %s, quality: %d",
        options.input_path, options.output_path, options.max_size, options.format, options.quality,
    )

    try:
        compress_file(
            options.input_path,
            options.output_path,
            options.max_size,
            options.format,
            options.quality,
        )
    except (GitfitError, OSError) as e:
        click.echo(f"Error compressing image: {e}", err=True)
        ctx.exit(1)

    click.echo("Image compressed successfully!")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
