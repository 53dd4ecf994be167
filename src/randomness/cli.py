"""Typer-based command line interface for generating random values.

The ``generate`` command prints one value of the requested kind, or an array
of values when ``--count`` is given.  ``--array`` uses ``array.count`` from
the settings instead.  Constraints come from the package
defaults merged with an optional YAML file.  Output is reproducible when a
seed is passed with ``--seed`` or through the environment variable named by
``seed.seed_env``.

Exit codes
----------
0 success
3 dictionary I/O error (missing or unreadable word list)
4 configuration or validation error
5 generation error
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional

import typer
import yaml
from pydantic import ValidationError

from .arrays import arrayify
from .config import SettingsModel, load_config
from .config.schema import KINDS
from .dictionary import DictionaryRepository
from .generators import generate_many
from .rng import RandomSource, SeededRandomSource, rng_for
from .utils.errors import ConfigError, DictionaryError, GenerationError, ValidationErrorKind
from .utils.logging import get_logger, setup_logging
from .validation import validate as validate_constraints

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

LOG = get_logger(__name__)

app = typer.Typer(
    name="randomness",
    help="Generate random integers, decimals, strings, words and UUIDs.",
)

_IO_FAILURES = {ValidationErrorKind.DICTIONARY_UNREADABLE}


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> None:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _load(config_path: Path | None) -> SettingsModel:
    try:
        return load_config(config_path)
    except ValidationError as exc:
        _safe_exit(4, str(exc).splitlines()[0])
    except yaml.YAMLError as exc:
        _safe_exit(4, f"Invalid YAML in config: {str(exc).splitlines()[0]}")
    except ConfigError as exc:
        _safe_exit(4, str(exc))
    except OSError as exc:
        _safe_exit(4, f"Cannot read config: {exc}")


def _random_source(cfg: SettingsModel, seed: str | None, kind: str) -> RandomSource:
    """Return a seeded source if a seed is available, else system entropy."""

    if seed is None and cfg.seed.value is not None:
        seed = cfg.seed.value.get_secret_value()
    if seed is None:
        return SeededRandomSource.system()
    LOG.debug("Using seeded random source for %s", kind)
    return rng_for(seed, namespace=kind)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.callback()
def main() -> None:
    """Entry point for the randomness command group."""
    pass


@app.command()
def generate(
    kind: str = typer.Argument(..., help="Value kind [integer|decimal|string|word|uuid]"),
    count: Optional[int] = typer.Option(  # noqa: B008
        None, "--count", "-n", min=1, help="Generate an array of COUNT values"
    ),
    as_array: bool = typer.Option(  # noqa: B008
        False, "--array", help="Generate an array of array.count values from the config"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    seed: Optional[str] = typer.Option(  # noqa: B008
        None, "--seed", help="Seed for reproducible output"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit debug messages to stderr"
    ),
) -> None:
    """Print a random value of KIND, or an array with ``--count`` or ``--array``."""

    if verbose:
        setup_logging("DEBUG", verbose=True)
    cfg = _load(config_path)

    if kind not in KINDS:
        _safe_exit(4, f"Unknown kind '{kind}'; expected one of {', '.join(KINDS)}")
    constraints = cfg.constraints_for(kind)

    repository = DictionaryRepository()
    failure = validate_constraints(constraints, repository=repository)
    if failure is not None:
        _safe_exit(3 if failure.kind in _IO_FAILURES else 4, failure.message)

    rng = _random_source(cfg, seed, kind)
    array = None
    if count is not None:
        array = cfg.array.model_copy(update={"count": count})
    elif as_array:
        array = cfg.array
    try:
        values = generate_many(
            constraints, rng, array.count if array is not None else 1, repository=repository
        )
    except DictionaryError as exc:
        _safe_exit(3, str(exc))
    except GenerationError as exc:
        _safe_exit(5, str(exc))

    typer.echo(arrayify(values, array) if array is not None else values[0])


@app.command()
def validate(
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
) -> None:
    """Validate the constraints of every value kind."""

    cfg = _load(config_path)
    repository = DictionaryRepository()
    failures = 0
    for kind in KINDS:
        failure = validate_constraints(cfg.constraints_for(kind), repository=repository)
        if failure is None:
            typer.echo(f"{kind}: ok")
        else:
            failures += 1
            typer.echo(f"{kind}: {failure.message}")
    if failures:
        _safe_exit(4, f"{failures} invalid section(s)")


@app.command()
def dictionaries(
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
) -> None:
    """List the active dictionaries with their word counts."""

    cfg = _load(config_path)
    repository = DictionaryRepository()
    for ref in cfg.word.active_dictionaries:
        try:
            dictionary = repository.get(ref)
        except DictionaryError as exc:
            _safe_exit(3, str(exc))
        typer.echo(f"{ref}\t{len(dictionary)} words")


__all__ = ["app"]
