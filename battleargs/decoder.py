"""Apply an action schema to a raw positional argument vector."""
from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Sequence

from .args import NamedArgs, Number
from .schema import ActionSchema


def decode(schema: ActionSchema, raw_args: Sequence[Number]) -> NamedArgs:
    """Decode ``raw_args`` into named fields according to ``schema``.

    Positions are 1-based. Scalar fields whose position lies past the end of
    the vector stay ``None``; multi-value fields always come back at their
    declared length with ``0`` for missing slots. Present positions that the
    schema does not claim are collected in ``unknown``.
    """

    values: Dict[str, object] = {}

    for name, position in schema.args.items():
        if position <= len(raw_args):
            values[name] = raw_args[position - 1]

    for name, positions in schema.multi_args.items():
        values[name] = tuple(_value_at(raw_args, position) for position in positions)

    claimed = schema.claimed_positions()
    unknown = {
        position: value
        for position, value in enumerate(raw_args, start=1)
        if position not in claimed
    }

    return NamedArgs(unknown=MappingProxyType(unknown), **values)


def _value_at(raw_args: Sequence[Number], position: int) -> Number:
    if position <= len(raw_args):
        return raw_args[position - 1]
    return 0


__all__ = ["decode"]
