"""Description text for decoded battle actions.

Base formatters render the main sentence for a family of actions; clause
producers each add one optional phrase. An action schema pairs one base
formatter with an ordered tuple of clauses, and every clause that returns
text is appended after a comma.
"""

from __future__ import annotations

import math
from typing import Iterable, Optional

from .args import NamedArgs, Number
from .battle_data import BattleData, TargetCategory
from .logging_config import get_logger
from .numerals import format_number, to_fixed, to_words, upper_first
from .schema import Options

logger = get_logger(__name__)

DAMAGE_CAP = 99999

_SINGLE_TARGETS = (TargetCategory.SELF, TargetCategory.SINGLE)


def format_attack(battle_data: BattleData, options: Options, args: NamedArgs) -> str:
    """Describe a physical or magical attack of one or more hits."""

    target = battle_data.target_range_category(options.get("target_range"))
    hits = _hit_count(args.barrage_num)
    count = upper_first(to_words(hits))
    who = "single" if target in _SINGLE_TARGETS else "group"
    ranged = "ranged " if args.atk_type is not None and args.atk_type == battle_data.indirect_atk_type else ""
    multiplier = to_fixed(args.damage_factor or 0, shift=2)

    if hits == 1:
        desc = f"{count} {who} {ranged}attack ({multiplier})"
    else:
        desc = f"{count} {who} {ranged}attacks ({multiplier} each)"

    if _option_flag(options, "max_damage_threshold_type"):
        desc += f" capped at {DAMAGE_CAP}"

    if args.force_hit:
        desc += ", 100% hit rate"
    if args.critical:
        desc += f", {format_number(args.critical)}% additional critical chance"

    status_id = _option_number(options, "status_ailments_id")
    if status_id:
        desc += f", causes {status_name(battle_data, int(status_id))}"
        factor = options.get("status_ailments_factor")
        if factor:
            desc += f" ({factor}%)"

    return desc


def format_heal(battle_data: BattleData, options: Options, args: NamedArgs) -> str:
    """Describe an HP heal.

    The undead clause is a heuristic: abilities and burst commands list it but
    soul breaks do not, and only the former can be countered, so the
    ``counter_enable`` option stands in for the action's origin.
    """

    result = "Restores HP"

    if args.factor:
        result += f" ({format_number(args.factor)})"

    if _option_flag(options, "counter_enable"):
        result += ", damages undeads"

    return result


def status_name(battle_data: BattleData, status_id: int) -> str:
    """Return a status description, or a placeholder for ids the catalog lacks."""

    status = battle_data.statuses.describe_single(status_id)
    if status is None:
        logger.warning("Unknown status ID %s", status_id)
        return f"unknown status {status_id}"
    return status.description


def format_statuses(
    battle_data: BattleData,
    status_ids: Optional[Iterable[Number]] = None,
    bundle_ids: Optional[Iterable[Number]] = None,
) -> str:
    """Join the known descriptions of individual statuses, then of bundles."""

    descriptions = []
    for status_id in status_ids or ():
        key = _status_key(status_id)
        status = None if key is None else battle_data.statuses.describe_single(key)
        if status is not None and status.description:
            descriptions.append(status.description)
    for bundle_id in bundle_ids or ():
        key = _status_key(bundle_id)
        bundle = None if key is None else battle_data.statuses.describe_bundle(key)
        if bundle is not None and bundle.description:
            descriptions.append(bundle.description)
    return ", ".join(descriptions)


def self_status_clause(battle_data: BattleData, options: Options, args: NamedArgs) -> Optional[str]:
    if args.self_sa_id is None:
        return None
    status_id = _status_key(args.self_sa_id)
    status = None if status_id is None else battle_data.statuses.describe_single(status_id)
    if status is None:
        shown = args.self_sa_id if status_id is None else status_id
        logger.warning("Unknown status ID %s", shown)
        return f"grants unknown status {shown} to the user"
    return f"{status.verb} {status.description} to the user"


def heal_by_damage_clause(battle_data: BattleData, options: Options, args: NamedArgs) -> Optional[str]:
    if args.heal_hp_factor is None:
        return None
    return f"heals the user for {format_number(args.heal_hp_factor)}% of the damage dealt"


def hp_barter_clause(battle_data: BattleData, options: Options, args: NamedArgs) -> Optional[str]:
    if not args.barter_rate:
        return None
    return f"damages the user for {format_number(args.barter_rate, shift=1)}% max HP"


def option_status_clause(battle_data: BattleData, options: Options, args: NamedArgs) -> Optional[str]:
    """List the status named by the ``status_ailments_id`` option."""

    status_id = _option_number(options, "status_ailments_id")
    if not status_id:
        return None
    statuses = format_statuses(battle_data, [status_id])
    if not statuses:
        logger.warning("Unknown status ID %s", int(status_id))
        return None
    return statuses


def removed_status_clause(battle_data: BattleData, options: Options, args: NamedArgs) -> Optional[str]:
    removed = format_statuses(battle_data, args.unset_sa_id, args.unset_sa_bundle)
    if not removed:
        return None
    return f"removes {removed}"


def _hit_count(barrage_num: Optional[Number]) -> int:
    # Absent, zero, fractional-below-one and non-finite counts mean one hit.
    if barrage_num is None:
        return 1
    if isinstance(barrage_num, float) and not math.isfinite(barrage_num):
        return 1
    return int(barrage_num) or 1


def _status_key(value: Number) -> Optional[int]:
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return int(value)


def _option_number(options: Options, key: str) -> Optional[float]:
    value = options.get(key)
    if value is None or value == "":
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _option_flag(options: Options, key: str) -> bool:
    return bool(_option_number(options, key))


__all__ = [
    "DAMAGE_CAP",
    "format_attack",
    "format_heal",
    "format_statuses",
    "heal_by_damage_clause",
    "hp_barter_clause",
    "option_status_clause",
    "removed_status_clause",
    "self_status_clause",
    "status_name",
]
