"""Typed constraint models and the settings loader.

The models only check structural limits of individual fields (a base between
2 and 36, a non-negative decimal count, single-character separators).  Rules
that relate several fields, such as ``min_value <= max_value`` or a non-empty
symbol set selection, are reported by :mod:`randomness.validation` so that a
caller can present them without catching exceptions.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Annotated, Any, Literal, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, SecretStr, confloat, conint, constr

from ..capitalization import CapitalizationMode
from ..decorators import FixedLengthOptions
from ..dictionary import SIMPLE_DICTIONARY
from ..symbols import SymbolSetId
from ..utils.errors import ConfigError

I64_MIN = -(2**63)
I64_MAX = 2**63 - 1

Separator = constr(max_length=1)
FiniteFloat = confloat(allow_inf_nan=False)
Length = conint(ge=0)

# ---------------------------------------------------------------------------
# Constraint models
# ---------------------------------------------------------------------------


class DictionaryRef(BaseModel):
    """Reference to a bundled resource or a user file holding words."""

    bundled: bool
    filename: constr(min_length=1)

    model_config = ConfigDict(extra="forbid", frozen=True)

    def __str__(self) -> str:
        return f"{'bundled' if self.bundled else 'user'}:{self.filename}"


class IntegerConstraints(BaseModel):
    """Settings for random integers."""

    kind: Literal["integer"] = "integer"
    min_value: conint(ge=I64_MIN, le=I64_MAX) = 0
    max_value: conint(ge=I64_MIN, le=I64_MAX) = 1000
    base: conint(ge=2, le=36) = 10
    grouping_separator: Separator | None = None
    uppercase: bool = False
    affix: str = ""
    fixed_length: FixedLengthOptions | None = None

    model_config = ConfigDict(extra="forbid")


class DecimalConstraints(BaseModel):
    """Settings for random decimals."""

    kind: Literal["decimal"] = "decimal"
    min_value: FiniteFloat = 0.0
    max_value: FiniteFloat = 1000.0
    decimal_count: conint(ge=0) = 2
    grouping_separator: Separator | None = None
    decimal_separator: Separator = "."
    show_trailing_zeroes: bool = True
    affix: str = ""

    model_config = ConfigDict(extra="forbid")


class StringConstraints(BaseModel):
    """Settings for random strings over a selection of symbol sets."""

    kind: Literal["string"] = "string"
    min_length: Length = 3
    max_length: Length = 8
    enclosure: str = '"'
    active_symbol_sets: list[SymbolSetId] = Field(
        default_factory=lambda: [SymbolSetId.UPPERCASE, SymbolSetId.LOWERCASE, SymbolSetId.DIGITS]
    )
    capitalization: CapitalizationMode = CapitalizationMode.RETAIN
    exclude_look_alike_symbols: bool = False

    model_config = ConfigDict(extra="forbid")


class WordConstraints(BaseModel):
    """Settings for random dictionary words."""

    kind: Literal["word"] = "word"
    min_length: Length = 3
    max_length: Length = 8
    enclosure: str = '"'
    capitalization: CapitalizationMode = CapitalizationMode.RETAIN
    active_dictionaries: list[DictionaryRef] = Field(
        default_factory=lambda: [DictionaryRef(bundled=True, filename=SIMPLE_DICTIONARY)]
    )

    model_config = ConfigDict(extra="forbid")


class UuidConstraints(BaseModel):
    """Settings for random version 4 UUIDs."""

    kind: Literal["uuid"] = "uuid"
    enclosure: str = '"'
    uppercase: bool = False
    add_dashes: bool = True

    model_config = ConfigDict(extra="forbid")


GenerationConstraints = Annotated[
    Union[
        IntegerConstraints,
        DecimalConstraints,
        StringConstraints,
        WordConstraints,
        UuidConstraints,
    ],
    Field(discriminator="kind"),
]


class ArrayConstraints(BaseModel):
    """How several generated values are joined into one array."""

    count: conint(ge=1) = 5
    brackets: tuple[str, str] | None = ("[", "]")
    separator: str = ","
    space_after_separator: bool = True

    model_config = ConfigDict(extra="forbid")


class SeedSettings(BaseModel):
    """Where the seed for reproducible output comes from."""

    seed_env: str
    value: SecretStr | None = None

    model_config = ConfigDict(extra="forbid")


class SettingsModel(BaseModel):
    """Top-level settings model."""

    schema_version: conint(ge=1)
    integer: IntegerConstraints
    decimal: DecimalConstraints
    string: StringConstraints
    word: WordConstraints
    uuid: UuidConstraints
    array: ArrayConstraints
    seed: SeedSettings

    model_config = ConfigDict(extra="forbid")

    def constraints_for(self, kind: str) -> GenerationConstraints:
        """Return the constraints section for ``kind``."""

        if kind not in KINDS:
            raise KeyError(f"Unknown value kind '{kind}'")
        return getattr(self, kind)


KINDS: tuple[str, ...] = ("integer", "decimal", "string", "word", "uuid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> SettingsModel:
    """Load settings from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    environment variable for the seed.

    Raises
    ------
    ConfigError
        If the user file does not contain a mapping at the top level.
    yaml.YAMLError
        If the user file is not valid YAML.
    """

    with (
        importlib_resources.files("randomness.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        if not isinstance(overrides, dict):
            raise ConfigError(
                f"Config file '{path}' should contain a mapping, not {type(overrides).__name__}"
            )
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    cfg = SettingsModel.model_validate(merged)

    environ = env if env is not None else os.environ
    seed_env = cfg.seed.seed_env
    if seed_env in environ:
        cfg.seed.value = SecretStr(environ[seed_env])

    return cfg


__all__ = [
    "I64_MIN",
    "I64_MAX",
    "KINDS",
    "DictionaryRef",
    "FixedLengthOptions",
    "IntegerConstraints",
    "DecimalConstraints",
    "StringConstraints",
    "WordConstraints",
    "UuidConstraints",
    "GenerationConstraints",
    "ArrayConstraints",
    "SeedSettings",
    "SettingsModel",
    "deep_merge_dicts",
    "load_config",
]
