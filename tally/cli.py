"""
Command-line interface for TALLY.

Provides a tracked file copy that shows the progress tree in action.
"""
import sys
from pathlib import Path
from typing import Optional, Tuple

import click
from rich.console import Console

from . import __version__
from .core.config import get_config
from .core.exceptions import TallyError
from .logging import setup_logging, get_logger
from .progress import Group, create_reporter, render_tree
from .transfer import plan_copy, copy_tracked


@click.group()
@click.version_option(version=__version__)
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, debug):
    """TALLY - Hierarchical progress tracking"""
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug

    setup_logging(level="DEBUG" if debug else None)


@cli.command()
@click.argument("sources", nargs=-1, required=True,
                type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("dest", type=click.Path(path_type=Path))
@click.option("--plain", is_flag=True, help="Plain text progress instead of a bar")
@click.option("--tree", "show_tree", is_flag=True, help="Print the progress tree when done")
@click.option("--chunk-size", type=click.IntRange(min=1), default=None,
              help="Bytes per read (default from TALLY_CHUNK_SIZE)")
def copy(sources: Tuple[Path, ...], dest: Path, plain: bool, show_tree: bool,
         chunk_size: Optional[int]):
    """Copy files while tracking progress across all of them."""
    logger = get_logger("cli")
    config = get_config()

    root = Group("copy")
    try:
        plan = plan_copy(sources, dest)
        logger.info(f"Copying {len(plan)} file(s) to {dest}")

        with create_reporter(root, plain=plain) as reporter:
            total = copy_tracked(root, plan, chunk_size or config.reporter.chunk_size)
        reporter.print_summary()

    except TallyError as e:
        logger.error(str(e))
        if e.suggestions:
            click.echo("\nSuggestions:")
            for i, tip in enumerate(e.suggestions, 1):
                click.echo(f"  {i}. {tip}")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(130)

    click.echo(f"Copied {len(plan)} file(s), {total} bytes")
    if show_tree:
        Console().print(render_tree(root))


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
