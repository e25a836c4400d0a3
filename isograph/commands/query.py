"""Query commands - closures, covers and boundaries over the lattice."""

from __future__ import annotations

import json

from rich.console import Console
from rich.table import Table

from ..lattice import (
    DIRECT_PROSCRIBED_ANOMALIES,
    IMPLIED_ANOMALIES,
    MODELS,
    all_implied_models,
    anomalies_prohibited_by,
    anomalies_to_impossible_models,
    boundary,
    canonical_model_name,
    friendly_model_name,
    known_anomalies,
    known_models,
    possible_models,
    strongest_models,
    weakest_models,
)


def _names(models, friendly: bool) -> list[str]:
    if friendly:
        return sorted({friendly_model_name(m) for m in models})
    return sorted(models)


def _print_list(console: Console, title: str, items: list[str]) -> None:
    console.print(f"[bold]{title}[/bold] ({len(items)})")
    if not items:
        console.print("  (none)", style="dim")
        return
    for item in items:
        console.print(f"  - {item}")


def run_boundary(
    anomalies: list[str],
    *,
    friendly: bool = True,
    output_json: bool = False,
) -> int:
    """Show the weakest models the anomalies rule out, and the stronger ones also ruled out."""
    result = boundary(anomalies)
    if friendly:
        result = result.friendly()

    if output_json:
        print(json.dumps({"anomalies": sorted(set(anomalies)), **result.to_dict()}, indent=2))
        return 0

    console = Console()
    console.print(f"[bold]Boundary for:[/bold] {', '.join(sorted(set(anomalies))) or '(no anomalies)'}\n")

    table = Table(title="Ruled out models")
    table.add_column("Kind", style="cyan")
    table.add_column("Models")
    table.add_row("not", ", ".join(sorted(result.not_)) or "-")
    table.add_row("also not", ", ".join(sorted(result.also_not)) or "-")
    console.print(table)
    return 0


def run_prohibited(models: list[str], *, output_json: bool = False) -> int:
    """Show the anomalies that cannot occur if all of the models hold."""
    prohibited = anomalies_prohibited_by(models)

    if output_json:
        print(json.dumps({"models": sorted(set(models)), "prohibited": prohibited}, indent=2))
        return 0

    _print_list(Console(), f"Anomalies prohibited by {', '.join(sorted(set(models)))}", prohibited)
    return 0


def run_impossible(
    anomalies: list[str],
    *,
    friendly: bool = True,
    output_json: bool = False,
) -> int:
    """Show the models the anomalies rule out, and those still possible."""
    impossible = anomalies_to_impossible_models(anomalies)
    possible = possible_models(impossible)

    data = {
        "anomalies": sorted(set(anomalies)),
        "impossible": _names(impossible, friendly),
        "possible": _names(possible, friendly),
    }

    if output_json:
        print(json.dumps(data, indent=2))
        return 0

    console = Console()
    _print_list(console, "Impossible models", data["impossible"])
    console.print()
    _print_list(console, "Possible models", data["possible"])
    return 0


def run_implied(models: list[str], *, friendly: bool = True, output_json: bool = False) -> int:
    """Show every model implied by the given ones."""
    implied = _names(all_implied_models(models), friendly)

    if output_json:
        print(json.dumps({"models": sorted(set(models)), "implied": implied}, indent=2))
        return 0

    _print_list(Console(), f"Models implied by {', '.join(sorted(set(models)))}", implied)
    return 0


def run_cover(
    models: list[str],
    *,
    weakest: bool = False,
    friendly: bool = True,
    output_json: bool = False,
) -> int:
    """Reduce models to their strongest (or weakest) covering subset."""
    reduced = weakest_models(models) if weakest else strongest_models(models)
    kind = "weakest" if weakest else "strongest"
    names = _names(reduced, friendly)

    if output_json:
        print(json.dumps({"models": sorted(set(models)), kind: names}, indent=2))
        return 0

    _print_list(Console(), f"{kind.capitalize()} models", names)
    return 0


def run_explain(tag: str, *, output_json: bool = False) -> int:
    """Explain what the tables know about a model or anomaly."""
    err = Console(stderr=True)

    canonical = canonical_model_name(tag)
    is_model = canonical in known_models()
    is_anomaly = tag in known_anomalies()

    if not is_model and not is_anomaly:
        err.print(f"Unknown model or anomaly: {tag}", style="bold red")
        return 1

    data: dict[str, object] = {"tag": tag}
    if is_model:
        data["model"] = {
            "canonical": canonical,
            "friendly": friendly_model_name(canonical),
            "implies": sorted(MODELS.successors(canonical)),
            "implied_by": sorted(MODELS.predecessors(canonical)),
            "directly_prohibits": sorted(DIRECT_PROSCRIBED_ANOMALIES.successors(canonical)),
        }
    if is_anomaly:
        data["anomaly"] = {
            "implies": sorted(IMPLIED_ANOMALIES.successors(tag)),
            "implied_by": sorted(IMPLIED_ANOMALIES.predecessors(tag)),
            "directly_prohibited_by": sorted(DIRECT_PROSCRIBED_ANOMALIES.predecessors(tag)),
        }

    if output_json:
        print(json.dumps(data, indent=2))
        return 0

    console = Console()
    for kind in ("model", "anomaly"):
        section = data.get(kind)
        if not isinstance(section, dict):
            continue
        table = Table(title=f"{tag} ({kind})")
        table.add_column("Field", style="cyan")
        table.add_column("Value")
        for key, value in section.items():
            shown = ", ".join(value) if isinstance(value, list) else str(value)
            table.add_row(key.replace("_", " "), shown or "-")
        console.print(table)
    return 0
