"""Decoded named arguments for a single battle action."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Dict, FrozenSet, Mapping, Optional, Tuple, Union

Number = Union[int, float]
MultiValue = Tuple[Number, ...]


@dataclass(frozen=True)
class NamedArgs:
    """Attribute bag produced by decoding a raw argument vector.

    Every attribute is optional: a field is ``None`` unless the action schema
    declares it and the raw vector has a value at its position. Multi-value
    fields always hold a tuple of the declared length once populated.
    ``unknown`` maps 1-based positions the schema does not claim to their raw
    values and exists for diagnostics only.
    """

    damage_factor: Optional[Number] = None
    barrage_num: Optional[Number] = None
    atk_type: Optional[Number] = None
    force_hit: Optional[Number] = None
    heal_hp_factor: Optional[Number] = None
    barter_rate: Optional[Number] = None
    self_sa_options_duration: Optional[Number] = None
    ignores_attack_hit: Optional[Number] = None
    elements: Optional[MultiValue] = None
    critical: Optional[Number] = None
    critical_coefficient: Optional[Number] = None
    min_damage_factor: Optional[Number] = None
    situational_recalculate_damage_hook_type: Optional[Number] = None
    damage_calculate_type_by_ability: Optional[Number] = None
    ignores_reflection: Optional[Number] = None
    ignores_mirage_and_mighty_guard: Optional[Number] = None
    ignores_status_ailments_barrier: Optional[Number] = None
    burst_ability: Optional[MultiValue] = None

    atk_exponential_factor: Optional[Number] = None
    matk_exponential_factor: Optional[Number] = None

    # Single elements; ``elements`` covers actions with several.
    atk_element: Optional[Number] = None
    matk_element: Optional[Number] = None

    # Healing factor.
    factor: Optional[Number] = None

    # Non-zero when every hit lands on the same target.
    is_same_target: Optional[Number] = None

    status_ailments_id: Optional[Number] = None
    status_ailments_options_duration: Optional[Number] = None
    status_ailments_boost_value: Optional[Number] = None
    status_ailments_boost_is_absolute: Optional[Number] = None

    # Status ailment id or bundle id applied to the user.
    self_sa_bundle_id: Optional[Number] = None
    self_sa_id: Optional[Number] = None
    optional_self_sa_id: Optional[Number] = None
    sa_self_options_duration: Optional[Number] = None
    self_sa_animation_flag: Optional[Number] = None

    set_sa_id: Optional[MultiValue] = None
    set_sa_bundle: Optional[MultiValue] = None
    unset_sa_id: Optional[MultiValue] = None
    unset_sa_bundle: Optional[MultiValue] = None

    # Stat boost percentages, merged with the boosts of the status definition.
    boosts_rate: Optional[MultiValue] = None

    damage_calculate_param_adjust: Optional[Number] = None
    damage_calculate_param_adjust_conf: Optional[MultiValue] = None

    wrapped_ability_id: Optional[Number] = None
    spare_receptor_ids: Optional[MultiValue] = None

    unknown: Mapping[int, Number] = field(default_factory=dict)

    def populated(self) -> Dict[str, Any]:
        """Return the fields that hold a value, in declaration order."""

        return {
            name: getattr(self, name)
            for name in _FIELD_ORDER
            if getattr(self, name) is not None
        }


def field_names() -> FrozenSet[str]:
    """Names a schema may map to raw positions."""

    return _FIELD_NAMES


_FIELD_ORDER: Tuple[str, ...] = tuple(f.name for f in fields(NamedArgs) if f.name != "unknown")
_FIELD_NAMES: FrozenSet[str] = frozenset(_FIELD_ORDER)


__all__ = ["MultiValue", "NamedArgs", "Number", "field_names"]
