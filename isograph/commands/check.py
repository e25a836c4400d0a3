"""Check command - evaluate a claims file against observed anomalies."""

from __future__ import annotations

import json
from pathlib import Path

from rich.console import Console
from rich.table import Table

from ..claims import ClaimsResult, evaluate_claims, load_claims


def run_check(claims_path: Path, *, output_json: bool = False) -> int:
    """Check a claims file.

    Args:
        claims_path: TOML file with claims_id, models and anomalies
        output_json: Output results as JSON instead of human-readable

    Returns:
        Exit code (0 = claims hold, 1 = violations found or invalid file)
    """
    err = Console(stderr=True)

    try:
        claims = load_claims(claims_path)
    except (OSError, ValueError) as e:
        err.print(f"Could not load claims: {e}", style="bold red")
        return 1

    result = evaluate_claims(claims)

    if output_json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        _print_human_output(Console(), result)

    return 0 if result.valid else 1


def _print_human_output(console: Console, result: ClaimsResult) -> None:
    data = result.to_dict()

    console.print(f"[bold]Claims: {result.claims.claims_id}[/bold]")
    if result.claims.description:
        console.print(result.claims.description, style="dim")
    console.print()

    table = Table(title="Claims check")
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Claimed models", ", ".join(data["models"]) or "-")
    table.add_row("Observed anomalies", ", ".join(data["anomalies"]) or "-")
    table.add_row("Violations", ", ".join(data["violations"]) or "-")
    table.add_row("Violated models", ", ".join(data["violated_models"]) or "-")
    table.add_row("Not", ", ".join(data["not"]) or "-")
    table.add_row("Also not", ", ".join(data["also_not"]) or "-")
    console.print(table)

    if result.valid:
        console.print("\n✓ Observed anomalies are consistent with the claimed models.", style="bold green")
    else:
        console.print(f"\n✗ {len(result.violations)} prohibited anomalies observed.", style="bold red")
