"""Per-locale argument layout tables extracted from game data.

Each game locale ships its own ``battleArgs.json`` keyed by action type name::

    {"PhysicalAttackMultiAction": {"args": {"damageFactor": 1}, "multiArgs": {}}}

The tables are external data and keep their camelCase field names. They are
used to find action types that appear in the game but have no hand-authored
schema.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Tuple, Union

from .exceptions import DataFileError
from .logging_config import get_logger

logger = get_logger(__name__)

TABLE_FILE = "battleArgs.json"


class LangType(str, Enum):
    GL = "gl"
    JP = "jp"


@dataclass(frozen=True)
class ArgLayout:
    """Raw positions for one action type as found in a locale table."""

    args: Mapping[str, int] = field(default_factory=dict)
    multi_args: Mapping[str, Tuple[int, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", MappingProxyType(dict(self.args)))
        object.__setattr__(
            self,
            "multi_args",
            MappingProxyType({name: tuple(positions) for name, positions in self.multi_args.items()}),
        )


def locale_table_path(data_dir: Union[str, Path], lang: LangType) -> Path:
    return Path(data_dir) / lang.value / TABLE_FILE


def parse_arg_tables(raw: object, source: Union[str, Path] = "<memory>") -> Dict[str, ArgLayout]:
    """Build layouts from an already parsed table."""

    if not isinstance(raw, dict):
        raise DataFileError(source, "top level must be an object keyed by action name")

    tables: Dict[str, ArgLayout] = {}
    for action, entry in raw.items():
        if not isinstance(entry, dict):
            raise DataFileError(source, f"entry for {action} must be an object")
        try:
            args = {str(name): int(position) for name, position in (entry.get("args") or {}).items()}
            multi_args = {
                str(name): tuple(int(position) for position in positions)
                for name, positions in (entry.get("multiArgs") or {}).items()
            }
        except (AttributeError, TypeError, ValueError) as exc:
            raise DataFileError(source, f"bad positions for {action}: {exc}") from exc
        tables[str(action)] = ArgLayout(args=args, multi_args=multi_args)
    return tables


def load_arg_tables(path: Union[str, Path]) -> Dict[str, ArgLayout]:
    """Load one locale's argument layout table.

    Raises:
        FileNotFoundError: If the table does not exist.
        DataFileError: If the table is not valid JSON or has the wrong shape.
    """
    table_path = Path(path)
    if not table_path.exists():
        raise FileNotFoundError(f"Argument table not found: {table_path}")

    try:
        with open(table_path, encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as exc:
        raise DataFileError(table_path, str(exc)) from exc

    tables = parse_arg_tables(raw, table_path)
    logger.debug("Loaded %d action layouts from %s", len(tables), table_path)
    return tables


def load_locale_tables(
    data_dir: Union[str, Path],
    langs: Iterable[LangType] = tuple(LangType),
) -> Dict[LangType, Dict[str, ArgLayout]]:
    """Load the tables of every requested locale under ``data_dir``."""

    return {lang: load_arg_tables(locale_table_path(data_dir, lang)) for lang in langs}


__all__ = [
    "ArgLayout",
    "LangType",
    "TABLE_FILE",
    "load_arg_tables",
    "load_locale_tables",
    "locale_table_path",
    "parse_arg_tables",
]
