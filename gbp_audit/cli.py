"""CLI entry point for GBP profile audits."""

import argparse
import asyncio
import json
import logging
import sys
from dataclasses import replace

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.status import Status
from rich.table import Table

from .audit import AuditSession, Failed
from .config import load_settings
from .models import Report
from .render import star_units
from .scoring import MAX_SCORE, score_band

BAND_STYLES = {"good": "bold green", "fair": "bold yellow", "poor": "bold red"}


def _print_report(console: Console, report: Report):
    metrics = report.metrics
    band = score_band(report.audit.score)

    console.print(f"\n[bold]Audit Report for {escape(metrics.business_name)}[/]")
    if metrics.address:
        console.print(f"[dim]{escape(metrics.address)}[/]")
    console.print(
        f"\nOverall Optimization Score: "
        f"[{BAND_STYLES[band]}]{report.audit.score}%[/] [dim](max {MAX_SCORE})[/]\n"
    )

    stars = "".join("★" if filled else "☆" for filled in star_units(metrics.rating))
    tiles = Table(show_header=False, box=None, padding=(0, 2))
    tiles.add_row("Average Rating", f"[yellow]{stars}[/] {metrics.rating:g}")
    tiles.add_row("Total Reviews", str(metrics.review_count))
    tiles.add_row("Uploaded Photos", str(metrics.photo_count))
    tiles.add_row(
        "Recent Posts",
        "[green]Yes[/]" if metrics.has_recent_post else "[red]No[/]",
    )
    console.print(tiles)

    if not report.audit.recommendations:
        console.print(
            Panel("This profile is highly optimized.", title="Excellent Work!", style="green")
        )
        return

    console.print("\n[bold]Recommendations for Improvement:[/]")
    for i, rec in enumerate(report.audit.recommendations, start=1):
        console.print(f"  [bold yellow]{i}. {escape(rec.title)}[/]\n     {escape(rec.text)}")
    console.print()


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(
        prog="gbp-audit",
        description="Audit a Google Business Profile from its share link.",
    )
    parser.add_argument("link", help="GBP share link (https://maps.app.goo.gl/...)")
    parser.add_argument(
        "--endpoint",
        default=None,
        help="Audit server endpoint (default: GBP_AUDIT_ENDPOINT or http://localhost:3001/api/audit)",
    )
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logging")
    args = parser.parse_args(argv)

    console = Console()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )

    settings = load_settings()
    if args.endpoint:
        settings = replace(settings, endpoint=args.endpoint)
    session = AuditSession(settings)

    status = Status("[bold cyan]Analyzing...[/]", console=console)
    status.start()
    try:
        state = asyncio.run(session.submit(args.link))
    except KeyboardInterrupt:
        status.stop()
        console.print("\n[yellow]Cancelled.[/]")
        sys.exit(1)
    except Exception as e:
        status.stop()
        console.print(f"\n[bold red]Error:[/] {escape(str(e))}\n")
        sys.exit(1)
    status.stop()

    if isinstance(state, Failed):
        console.print(f"\n[bold red]Error:[/] {escape(state.message)}\n")
        sys.exit(1)

    if args.json:
        console.print_json(json.dumps(state.report.to_dict()))
    else:
        _print_report(console, state.report)


if __name__ == "__main__":
    main()
