"""
tokenforge CLI.

Commands:
- generate: build tokens and write (or print) export files
- scale: print the 11-step scale for a seed color
- contrast: WCAG verdicts for a foreground/background pair
- audit: contrast audit of every surface/text pair
"""

from __future__ import annotations

import json
import logging
import platform
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tokenforge._version import get_version
from tokenforge.core.aggregator import CustomColors, create_design_tokens
from tokenforge.core.color import hex_to_hsl
from tokenforge.core.contrast import audit_surface_contrast, check_contrast, get_contrast_ratio
from tokenforge.core.errors import TokenForgeError
from tokenforge.core.manifest import ProjectManifest, find_manifest, load_manifest
from tokenforge.core.scales import generate_color_scale, generate_dark_mode_scale
from tokenforge.exporters import export_format, resolve_format, write_bundle

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="""tokenforge – design tokens from seed colors

Commands:
  • generate: export CSS, Tailwind, design-tool JSON and TypeScript tokens
  • scale: preview the scale generated from one seed
  • contrast / audit: WCAG contrast checks
""",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)

SeedOption = Annotated[str | None, typer.Option(help="Seed color, e.g. '#2563eb'")]


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"tokenforge {get_version()}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version information",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option("--log-level", envvar="TOKENFORGE_LOG_LEVEL", help="Logging level"),
    ] = "WARNING",
) -> None:
    """tokenforge CLI main callback for global options."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _load_project(manifest_path: Path | None) -> ProjectManifest:
    """Load the given manifest, or the nearest tokenforge.toml, or defaults."""
    path = manifest_path or find_manifest(Path.cwd())
    if path is None:
        logger.debug("No tokenforge.toml found, using defaults")
        return ProjectManifest(project_root=Path.cwd())
    return load_manifest(path)


def _merge_seeds(
    manifest: ProjectManifest,
    primary: str | None,
    secondary: str | None,
    accent: str | None,
) -> CustomColors:
    """Command-line seeds override manifest seeds."""
    return CustomColors(
        primary=primary or manifest.seeds.primary,
        secondary=secondary or manifest.seeds.secondary,
        accent=accent or manifest.seeds.accent,
    )


def _fail(error: TokenForgeError) -> typer.Exit:
    err_console.print(f"[red]Error:[/red] {escape(str(error))}")
    return typer.Exit(code=1)


# =============================================================================
# Commands
# =============================================================================


@app.command(name="generate")
def generate_command(
    manifest_path: Annotated[
        Path | None,
        typer.Option("--manifest", "-m", help="Path to tokenforge.toml (default: search upwards)"),
    ] = None,
    primary: SeedOption = None,
    secondary: SeedOption = None,
    accent: SeedOption = None,
    formats: Annotated[
        list[str] | None,
        typer.Option(
            "--format",
            "-f",
            help="Format to export (css, tailwind, figmaJSON, typescript); repeatable",
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output directory (default: manifest export dir)"),
    ] = None,
    stdout: Annotated[
        bool, typer.Option("--stdout", help="Print a single format instead of writing files")
    ] = False,
) -> None:
    """
    Generate design tokens and export them.

    Examples:
        tokenforge generate                            # All formats into ./tokens
        tokenforge generate --primary '#0f766e' -o out
        tokenforge generate -f css --stdout            # Print the style sheet
    """
    try:
        project = _load_project(manifest_path)
        selected = (
            [resolve_format(f) for f in formats] if formats else list(project.export.formats)
        )
        tokens = create_design_tokens(_merge_seeds(project, primary, secondary, accent))

        if stdout:
            if len(selected) != 1:
                err_console.print("[red]Error:[/red] --stdout needs exactly one --format")
                raise typer.Exit(code=1)
            typer.echo(export_format(tokens, selected[0]))
            return

        bundle = {fmt.value: export_format(tokens, fmt) for fmt in selected}
        written = write_bundle(bundle, output or project.output_path, selected)
    except TokenForgeError as e:
        raise _fail(e) from e

    for path in written:
        console.print(f"[green]✓[/green] {escape(str(path))}")


@app.command(name="scale")
def scale_command(
    seed: Annotated[str, typer.Argument(help="Seed color, e.g. '#2563eb'")],
    dark: Annotated[bool, typer.Option("--dark", help="Show the mirrored dark-mode scale")] = False,
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Show the 11-step scale generated from a seed color."""
    scale = generate_color_scale(seed)
    if dark:
        scale = generate_dark_mode_scale(scale)

    if output_json:
        typer.echo(json.dumps(scale, indent=2))
        return

    table = Table(title=f"Scale for {escape(seed)}" + (" (dark)" if dark else ""))
    table.add_column("Shade", justify="right")
    table.add_column("Hex")
    table.add_column("HSL")
    table.add_column("vs white", justify="right")
    table.add_column("vs black", justify="right")
    for shade, value in scale.items():
        h, s, lightness = hex_to_hsl(value)
        table.add_row(
            shade,
            f"[on {value}]   [/] {value}",
            f"{h:.0f}° {s:.0f}% {lightness:.0f}%",
            f"{get_contrast_ratio(value, '#ffffff'):.2f}",
            f"{get_contrast_ratio(value, '#000000'):.2f}",
        )
    console.print(table)


@app.command(name="contrast")
def contrast_command(
    foreground: Annotated[str, typer.Argument(help="Text color")],
    background: Annotated[str, typer.Argument(help="Background color")],
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Report the WCAG contrast ratio and AA/AAA verdicts for a color pair."""
    result = check_contrast(foreground, background)
    if output_json:
        typer.echo(
            json.dumps(
                {
                    "foreground": result.foreground,
                    "background": result.background,
                    "ratio": round(result.ratio, 2),
                    "aa": result.aa,
                    "aaLarge": result.aa_large,
                    "aaa": result.aaa,
                    "aaaLarge": result.aaa_large,
                    "level": result.level,
                },
                indent=2,
            )
        )
        return

    mark = {True: "[green]pass[/green]", False: "[red]fail[/red]"}
    console.print(f"Contrast ratio: [bold]{result.ratio:.2f}:1[/bold] ({result.level})")
    console.print(f"  AA normal:  {mark[result.aa]}    AA large:  {mark[result.aa_large]}")
    console.print(f"  AAA normal: {mark[result.aaa]}    AAA large: {mark[result.aaa_large]}")


@app.command(name="audit")
def audit_command(
    manifest_path: Annotated[
        Path | None,
        typer.Option("--manifest", "-m", help="Path to tokenforge.toml (default: search upwards)"),
    ] = None,
    primary: SeedOption = None,
    secondary: SeedOption = None,
    accent: SeedOption = None,
) -> None:
    """Check every surface/text color pair in both modes; exit 1 if any fails AA."""
    try:
        project = _load_project(manifest_path)
    except TokenForgeError as e:
        raise _fail(e) from e

    tokens = create_design_tokens(_merge_seeds(project, primary, secondary, accent))
    checks = audit_surface_contrast(tokens)

    table = Table(title="Surface contrast")
    table.add_column("Mode")
    table.add_column("Surface")
    table.add_column("Text")
    table.add_column("Ratio", justify="right")
    table.add_column("Level")
    for check in checks:
        style = "green" if check.result.aa else "red"
        table.add_row(
            check.mode,
            f"{check.surface} {check.result.background}",
            f"{check.foreground} {check.result.foreground}",
            f"{check.result.ratio:.2f}",
            f"[{style}]{check.result.level}[/{style}]",
        )
    console.print(table)

    if not all(check.result.aa for check in checks):
        raise typer.Exit(code=1)


# =============================================================================
# Main Entry Point
# =============================================================================


def main() -> None:
    app(standalone_mode=True)


if __name__ == "__main__":
    main()
