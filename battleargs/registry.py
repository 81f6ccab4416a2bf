"""Hand-authored argument layouts for the battle actions we can describe.

Positions are 1-based indexes into the action's raw argument vector. Gaps are
positions whose meaning is unknown. Fields listed in ``pending`` are decoded
but not yet reflected in the description text.
"""

from __future__ import annotations

from .formatting import (
    format_attack,
    format_heal,
    heal_by_damage_clause,
    hp_barter_clause,
    option_status_clause,
    removed_status_clause,
    self_status_clause,
)
from .schema import ActionSchema, DamageFormula, SchemaRegistry

ACTION_SCHEMAS: tuple[ActionSchema, ...] = (
    ActionSchema(
        name="HealHpAction",
        formula=DamageFormula.MAGICAL,
        args={
            "factor": 1,
            "matk_element": 2,
            "damage_factor": 3,
        },
        formatter=format_heal,
    ),
    ActionSchema(
        name="HealHpAndCustomParamAction",
        args={
            "factor": 1,
            "matk_element": 2,
            "damage_factor": 3,
            "status_ailments_boost_value": 4,
            "status_ailments_options_duration": 5,
            "status_ailments_boost_is_absolute": 6,
        },
        formatter=format_heal,
        clauses=(option_status_clause,),
        pending=frozenset({
            "status_ailments_boost_value",
            "status_ailments_options_duration",
            "status_ailments_boost_is_absolute",
        }),
    ),
    ActionSchema(
        name="HealHpAndHealSaAction",
        formula=DamageFormula.MAGICAL,
        args={
            "factor": 1,
            "matk_element": 2,
            "damage_factor": 3,
        },
        formatter=format_heal,
        clauses=(removed_status_clause,),
    ),
    # Simple single-hit magic attacks, such as a magicite's auto-attack.
    ActionSchema(
        name="MagicAttackAction",
        args={
            "damage_factor": 1,
            "matk_element": 2,
            "min_damage_factor": 3,
        },
        formatter=format_attack,
    ),
    ActionSchema(
        name="MagicAttackMultiAction",
        formula=DamageFormula.MAGICAL,
        args={
            "damage_factor": 1,
            "matk_element": 2,
            "min_damage_factor": 3,
            "barrage_num": 4,
            "is_same_target": 5,
            "situational_recalculate_damage_hook_type": 7,
            "damage_calculate_param_adjust": 8,
            "damage_calculate_type_by_ability": 13,
            "matk_exponential_factor": 14,
        },
        multi_args={
            "damage_calculate_param_adjust_conf": (9, 10, 11, 12),
        },
        formatter=format_attack,
        pending=frozenset({
            "min_damage_factor",
            "situational_recalculate_damage_hook_type",
            "damage_calculate_param_adjust",
            "damage_calculate_type_by_ability",
            "matk_exponential_factor",
        }),
    ),
    ActionSchema(
        name="MagicAttackMultiWithMultiElementAction",
        formula=DamageFormula.MAGICAL,
        args={
            "damage_factor": 1,
            "min_damage_factor": 2,
            "barrage_num": 3,
            "is_same_target": 4,
            "damage_calculate_type_by_ability": 10,
            "matk_exponential_factor": 11,
            "damage_calculate_param_adjust": 12,
        },
        multi_args={
            "damage_calculate_param_adjust_conf": (13, 14, 15, 16, 17, 18),
        },
        formatter=format_attack,
    ),
    # Simple single-hit physical attacks, such as the Attack command an
    # en-element status substitutes.
    ActionSchema(
        name="PhysicalAttackElementAction",
        args={
            "damage_factor": 1,
            "atk_element": 2,
            "atk_type": 3,
            "force_hit": 4,
        },
        formatter=format_attack,
    ),
    ActionSchema(
        name="PhysicalAttackMultiAction",
        args={
            "damage_factor": 1,
            "barrage_num": 2,
            "atk_type": 3,
            "force_hit": 4,
            "atk_element": 5,
            "is_same_target": 6,
            "critical": 7,
            "damage_calculate_param_adjust": 8,
            "situational_recalculate_damage_hook_type": 9,
            "damage_calculate_type_by_ability": 14,
            "atk_exponential_factor": 16,
        },
        multi_args={
            "damage_calculate_param_adjust_conf": (10, 11, 12, 13, 15),
        },
        formatter=format_attack,
        pending=frozenset({"atk_exponential_factor"}),
    ),
    ActionSchema(
        name="PhysicalAttackMultiAndHealHpByHitDamageAction",
        formula=DamageFormula.PHYSICAL,
        args={
            "damage_factor": 1,
            "barrage_num": 2,
            "atk_type": 3,
            "force_hit": 4,
            "is_same_target": 6,
            "heal_hp_factor": 7,
        },
        formatter=format_attack,
        clauses=(heal_by_damage_clause,),
    ),
    ActionSchema(
        name="PhysicalAttackMultiAndHpBarterAndSelfSaAction",
        formula=DamageFormula.PHYSICAL,
        args={
            "damage_factor": 1,
            "barter_rate": 2,
            "atk_type": 4,
            "force_hit": 5,
            "barrage_num": 6,
            "is_same_target": 7,
            "self_sa_bundle_id": 9,
            "self_sa_options_duration": 10,
            "ignores_attack_hit": 11,
            "self_sa_animation_flag": 12,
        },
        formatter=format_attack,
        clauses=(hp_barter_clause,),
        # TODO: self_sa_bundle_id holds either a status id or a bundle id; describe it
        # once the status catalog can tell the two apart.
        pending=frozenset({"self_sa_bundle_id", "self_sa_options_duration"}),
    ),
    ActionSchema(
        name="PhysicalAttackMultiAndSelfSaAction",
        formula=DamageFormula.PHYSICAL,
        args={
            "damage_factor": 1,
            "barrage_num": 2,
            "atk_type": 3,
            "force_hit": 4,
            "is_same_target": 6,
            "self_sa_id": 7,
            "ignores_attack_hit": 8,
            "self_sa_options_duration": 9,
            "self_sa_animation_flag": 10,
            "damage_calculate_param_adjust": 12,
            "critical": 17,
        },
        multi_args={
            "damage_calculate_param_adjust_conf": (13, 14),
        },
        formatter=format_attack,
        clauses=(self_status_clause,),
    ),
    ActionSchema(
        name="PhysicalAttackMultiWithMultiElementAction",
        args={
            "damage_factor": 1,
            "barrage_num": 2,
            "atk_type": 3,
            "force_hit": 4,
            "is_same_target": 5,
            "critical_coefficient": 10,
            "damage_calculate_param_adjust": 11,
            "critical": 19,
        },
        multi_args={
            "damage_calculate_param_adjust_conf": (12, 13, 14, 15, 16, 17, 18),
        },
        formatter=format_attack,
    ),
)

DEFAULT_REGISTRY = SchemaRegistry(ACTION_SCHEMAS)


__all__ = ["ACTION_SCHEMAS", "DEFAULT_REGISTRY"]
