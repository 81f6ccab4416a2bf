"""One-call entry point: look up, decode and format a battle action."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from .args import NamedArgs, Number
from .battle_data import BattleData
from .decoder import decode
from .logging_config import get_logger
from .registry import DEFAULT_REGISTRY
from .schema import ActionSchema, Options, SchemaRegistry

logger = get_logger(__name__)


@dataclass(frozen=True)
class Description:
    """Rendered text together with the decoded arguments behind it."""

    action: str
    schema: ActionSchema
    args: NamedArgs
    text: str


def describe(
    action: str,
    raw_args: Sequence[Number],
    options: Optional[Options] = None,
    *,
    battle_data: BattleData,
    registry: SchemaRegistry = DEFAULT_REGISTRY,
) -> Optional[Description]:
    """Describe one action instance.

    Returns ``None`` when ``action`` has no schema; callers decide whether to
    skip or flag the record.
    """

    schema = registry.lookup(action)
    if schema is None:
        logger.debug("No schema for action type %s", action)
        return None

    args = decode(schema, raw_args)
    text = schema.format(battle_data, options or {}, args)
    return Description(action=action, schema=schema, args=args, text=text)


__all__ = ["Description", "describe"]
