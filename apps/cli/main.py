"""CLI application for the workspace updater."""

import asyncio
import logging
from pathlib import Path

import typer
from rich.console import Console

from core.errors import ManifestNotFound, ManifestParseError, WriteFailure
from core.log import setup_logging
from core.models import CheckOptions, OutdatedEntry
from core.pipeline import check_dependencies
from core.report import bucket_order, bucket_title, format_json, format_report
from core.resolve_npm import DEFAULT_REGISTRY_URL

console = Console()
logger = logging.getLogger("apps.cli.main")

BUCKET_STYLES = {"major": "red", "minor": "blue", "patch": "green"}


def print_report(entries: list[OutdatedEntry]) -> None:
    """Print the grouped report, highlighting bucket titles."""
    title_styles = {
        f"  {bucket_title(bucket)}": BUCKET_STYLES.get(bucket) for bucket in bucket_order()
    }
    for line in format_report(entries):
        console.print(
            line, style=title_styles.get(line), markup=False, highlight=False, soft_wrap=True
        )


def print_json(entries: list[OutdatedEntry]) -> None:
    console.print(format_json(entries), markup=False, highlight=False, soft_wrap=True)


app = typer.Typer(
    name="workspace-updater",
    help="Checks for outdated dependencies in the pnpm-workspace.yaml catalog.",
    add_completion=False,
)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def check(
    update: bool = typer.Option(
        False, "--update", help="Update the pnpm-workspace.yaml file with the latest versions."
    ),
    patch: bool = typer.Option(
        False, "--patch", help="When used with --update, only update patch-level changes."
    ),
    minor: bool = typer.Option(
        False, "--minor", help="When used with --update, only update minor-level changes."
    ),
    major: bool = typer.Option(
        False, "--major", help="When used with --update, only update major-level changes."
    ),
    workspace: Path | None = typer.Option(
        None, "-w", "--workspace", help="Explicitly define the location of the pnpm-workspace.yaml file."
    ),
    registry: str = typer.Option(DEFAULT_REGISTRY_URL, "--registry", help="npm registry base URL."),
    timeout: float = typer.Option(30.0, "--timeout", help="Registry request timeout in seconds."),
    format_type: str = typer.Option("text", "--format", help="Output format: text or json."),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging."),
) -> None:
    """Check the pnpm-workspace.yaml catalog against the npm registry."""
    setup_logging(verbose=verbose)

    if format_type not in ("text", "json"):
        console.print(f"Error: Unsupported format: {format_type}", style="red")
        raise typer.Exit(1)

    options = CheckOptions(
        workspace_path=workspace,
        update=update,
        major=major,
        minor=minor,
        patch=patch,
        registry_url=registry,
        timeout=timeout,
        output_format=format_type,
    )
    report = print_json if format_type == "json" else print_report

    try:
        logger.info("Looking for pnpm-workspace.yaml...")
        result = asyncio.run(check_dependencies(options, on_report=report))

        if result.updated:
            console.print(
                f"{result.manifest.path} has been updated ({len(result.updated)} entries).",
                markup=False,
                highlight=False,
                soft_wrap=True,
            )

    except ManifestNotFound as e:
        console.print(f"Error: {e}", style="red", markup=False, highlight=False, soft_wrap=True)
        raise typer.Exit(1)
    except (ManifestParseError, WriteFailure) as e:
        logger.error("Error checking dependencies: %s", e)
        raise typer.Exit(1)
    except Exception as e:
        console.print(f"Error: {e}", style="red", markup=False, highlight=False, soft_wrap=True)
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
