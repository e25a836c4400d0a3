"""CLI entrypoint for isograph."""

import logging
import sys
from pathlib import Path

import click

from . import __version__


def _require_known(tags: tuple[str, ...], *, strict: bool, kind: str, param_hint: str) -> list[str]:
    """Return tags as a list, rejecting unknown ones when strict."""
    if strict:
        from .lattice import unknown_anomalies, unknown_models

        unknown = unknown_models(tags) if kind == "model" else unknown_anomalies(tags)
        if unknown:
            raise click.BadParameter(f"Unknown {kind}(s): {', '.join(unknown)}", param_hint=param_hint)
    return list(tags)


strict_option = click.option(
    "--strict",
    is_flag=True,
    help="Reject tags that appear in no table instead of treating them as unrelated",
)
json_option = click.option(
    "--json",
    "output_json",
    is_flag=True,
    help="Output results as JSON",
)
friendly_option = click.option(
    "--friendly/--canonical",
    default=True,
    show_default=True,
    help="Render model names in friendly or canonical (Adya) form",
)


@click.group()
@click.version_option(__version__, prog_name="isograph")
@click.option("--verbose", is_flag=True, help="Log closure computations to stderr")
def cli(verbose: bool) -> None:
    """isograph - Relate transaction anomalies to consistency models.

    Given anomalies observed in a history, find which consistency models they
    rule out. Given models a system claims, find which anomalies cannot occur.
    """
    if verbose:
        from rich.logging import RichHandler

        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(show_path=False)],
        )


@cli.command()
@click.argument("anomalies", nargs=-1, required=True)
@friendly_option
@json_option
@strict_option
def boundary(anomalies: tuple[str, ...], friendly: bool, output_json: bool, strict: bool) -> None:
    """Show the weakest models ANOMALIES rule out, and the stronger ones also ruled out.

    Examples:

        isograph boundary G1a

        isograph boundary G-single G2-item --json
    """
    from .commands.query import run_boundary

    tags = _require_known(anomalies, strict=strict, kind="anomaly", param_hint="ANOMALIES")
    sys.exit(run_boundary(tags, friendly=friendly, output_json=output_json))


@cli.command()
@click.argument("anomalies", nargs=-1, required=True)
@friendly_option
@json_option
@strict_option
def impossible(anomalies: tuple[str, ...], friendly: bool, output_json: bool, strict: bool) -> None:
    """List every model ANOMALIES rule out, and every model still possible."""
    from .commands.query import run_impossible

    tags = _require_known(anomalies, strict=strict, kind="anomaly", param_hint="ANOMALIES")
    sys.exit(run_impossible(tags, friendly=friendly, output_json=output_json))


@cli.command()
@click.argument("models", nargs=-1, required=True)
@json_option
@strict_option
def prohibited(models: tuple[str, ...], output_json: bool, strict: bool) -> None:
    """List the anomalies that cannot occur if all of MODELS hold."""
    from .commands.query import run_prohibited

    tags = _require_known(models, strict=strict, kind="model", param_hint="MODELS")
    sys.exit(run_prohibited(tags, output_json=output_json))


@cli.command()
@click.argument("models", nargs=-1, required=True)
@friendly_option
@json_option
@strict_option
def implied(models: tuple[str, ...], friendly: bool, output_json: bool, strict: bool) -> None:
    """List every model implied by MODELS."""
    from .commands.query import run_implied

    tags = _require_known(models, strict=strict, kind="model", param_hint="MODELS")
    sys.exit(run_implied(tags, friendly=friendly, output_json=output_json))


@cli.command()
@click.argument("models", nargs=-1, required=True)
@click.option("--weakest", is_flag=True, help="Reduce to the weakest models instead of the strongest")
@friendly_option
@json_option
@strict_option
def cover(models: tuple[str, ...], weakest: bool, friendly: bool, output_json: bool, strict: bool) -> None:
    """Reduce MODELS to a subset covering the rest.

    By default keeps the strongest models, which imply all the others.

    Examples:

        isograph cover serializable strict-serializable

        isograph cover serializable strict-serializable --weakest
    """
    from .commands.query import run_cover

    tags = _require_known(models, strict=strict, kind="model", param_hint="MODELS")
    sys.exit(run_cover(tags, weakest=weakest, friendly=friendly, output_json=output_json))


@cli.command()
@click.argument("tag")
@json_option
def explain(tag: str, output_json: bool) -> None:
    """Explain what is known about a model or anomaly TAG."""
    from .commands.query import run_explain

    sys.exit(run_explain(tag, output_json=output_json))


@cli.command()
@click.argument(
    "claims_file",
    type=click.Path(exists=True, file_okay=True, dir_okay=False, path_type=Path),
)
@json_option
def check(claims_file: Path, output_json: bool) -> None:
    """Check observed anomalies against claimed models.

    CLAIMS_FILE is TOML:

    \b
    claims_id = "append-test"
    models = ["serializable"]
    anomalies = ["G-single"]

    Exits 1 when an observed anomaly is prohibited by a claimed model.
    """
    from .commands.check import run_check

    sys.exit(run_check(claims_file, output_json=output_json))


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
