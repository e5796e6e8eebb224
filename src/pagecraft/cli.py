"""
pagecraft CLI.

    pagecraft compile page.yaml --theme theme.yaml --out styles.css
    pagecraft compile page.json --mode edit --breakpoint mobile
    pagecraft breakpoints
"""

from __future__ import annotations

import json
import logging
import platform
from pathlib import Path

import typer

from pagecraft._version import get_version
from pagecraft.core.errors import PagecraftError
from pagecraft.core.page_loader import load_page
from pagecraft.core.theme_loader import load_theme
from pagecraft.export import compile_page, consolidate_stylesheet, render_style_block
from pagecraft.specs.responsive import BREAKPOINT_ORDER, BREAKPOINTS, Breakpoint
from pagecraft.styles.emitter import RenderMode
from pagecraft.styles.selectors import VISIBILITY_QUERIES, media_query

logger = logging.getLogger(__name__)


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"pagecraft version {get_version()}")
        typer.echo(f"  Python: {platform.python_implementation()} {platform.python_version()}")
        raise typer.Exit()


app = typer.Typer(
    help="pagecraft - responsive CSS generation for page builder components",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version information",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """pagecraft CLI main callback for global options."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command(name="compile")
def compile_command(
    page: Path = typer.Argument(..., help="Page document (YAML or JSON)"),  # noqa: B008
    theme: Path | None = typer.Option(  # noqa: B008
        None,
        "--theme",
        "-t",
        help="Theme settings file (default: $PAGECRAFT_THEME or ./theme.yaml)",
    ),
    mode: RenderMode = typer.Option(RenderMode.EXPORT, "--mode", "-m", help="Render mode"),
    breakpoint: Breakpoint = typer.Option(
        Breakpoint.DESKTOP, "--breakpoint", "-b", help="Active breakpoint (edit mode)"
    ),
    out: Path | None = typer.Option(  # noqa: B008
        None, "--out", "-o", help="Write to file instead of stdout"
    ),
    style_tag: bool = typer.Option(False, "--style-tag", help="Wrap output in a <style> block"),
) -> None:
    """Compile a page's component styles into one stylesheet."""
    try:
        global_defaults = load_theme(theme)
        document = load_page(page)
    except PagecraftError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from e

    logger.debug("Compiling %s in %s mode at %s", page, mode, breakpoint)
    bundles = compile_page(document, global_defaults, mode, breakpoint)

    if mode is RenderMode.EDIT:
        inline = {
            bundle.selector: bundle.inline_styles for bundle in bundles if bundle.inline_styles
        }
        output = json.dumps(inline, indent=2) + "\n"
        rules = consolidate_stylesheet(bundles)
        if rules:
            output += "\n" + rules
    else:
        output = consolidate_stylesheet(bundles, global_defaults.custom_css)
        if style_tag:
            output = render_style_block(output)

    if out is not None:
        out.write_text(output, encoding="utf-8")
        typer.echo(f"Wrote {len(bundles)} component styles to {out}")
    else:
        typer.echo(output, nl=False)


@app.command(name="breakpoints")
def breakpoints_command() -> None:
    """Show breakpoint ranges and the media queries emitted for them."""
    for bp in BREAKPOINT_ORDER:
        rng = BREAKPOINTS[bp]
        low = f"{rng.min_width}px" if rng.min_width is not None else "0px"
        high = f"{rng.max_width}px" if rng.max_width is not None else "up"
        query = media_query(bp) or "(base rule)"
        typer.echo(f"{rng.label:<8} {low:>7} - {high:<7} {query}")
    typer.echo("")
    typer.echo("Visibility:")
    for target, query in VISIBILITY_QUERIES.items():
        typer.echo(f"  {target.value:<17} {query}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
