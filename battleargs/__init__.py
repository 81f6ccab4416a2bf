"""Decode battle action argument vectors and describe their effects."""

from . import args, battle_data, decoder, describe, exceptions, formatting, numerals, registry, schema, tables
from .args import NamedArgs
from .battle_data import BattleData, default_battle_data, load_battle_data
from .decoder import decode
from .describe import Description
from .registry import DEFAULT_REGISTRY
from .schema import ActionSchema, DamageFormula, SchemaRegistry

__all__ = [
    "ActionSchema",
    "BattleData",
    "DEFAULT_REGISTRY",
    "DamageFormula",
    "Description",
    "NamedArgs",
    "SchemaRegistry",
    "args",
    "battle_data",
    "decode",
    "decoder",
    "default_battle_data",
    "describe",
    "exceptions",
    "formatting",
    "load_battle_data",
    "numerals",
    "registry",
    "schema",
    "tables",
]
