import pytest

from battleargs.args import NamedArgs
from battleargs.decoder import decode
from battleargs.registry import DEFAULT_REGISTRY


def schema(name):
    found = DEFAULT_REGISTRY.lookup(name)
    assert found is not None
    return found


def test_scalar_fields_read_their_positions():
    args = decode(schema("PhysicalAttackElementAction"), [500, 2, 1, 100])

    assert args.damage_factor == 500
    assert args.atk_element == 2
    assert args.atk_type == 1
    assert args.force_hit == 100
    assert dict(args.unknown) == {}


def test_missing_scalar_position_is_absent_not_zero():
    args = decode(schema("MagicAttackAction"), [300, 1])

    assert args.damage_factor == 300
    assert args.matk_element == 1
    assert args.min_damage_factor is None


def test_fields_not_in_schema_stay_none():
    args = decode(schema("MagicAttackAction"), [300, 1, 50])

    assert args.barrage_num is None
    assert args.atk_type is None
    assert args.damage_calculate_param_adjust_conf is None


def test_multi_value_field_zero_fills_short_vectors():
    args = decode(schema("MagicAttackMultiAction"), [100, 0, 0, 2, 0, 0, 0, 0, 7, 8])

    assert args.damage_calculate_param_adjust_conf == (7, 8, 0, 0)


def test_multi_value_field_keeps_declared_order():
    layout = schema("PhysicalAttackMultiAction")
    raw = list(range(1, 17))

    args = decode(layout, raw)

    assert args.damage_calculate_param_adjust_conf == (10, 11, 12, 13, 15)
    assert args.damage_calculate_type_by_ability == 14
    assert args.atk_exponential_factor == 16


def test_unclaimed_positions_are_recorded_as_unknown():
    args = decode(schema("PhysicalAttackElementAction"), [500, 2, 1, 100, 7, 8])

    assert dict(args.unknown) == {5: 7, 6: 8}


def test_gaps_inside_schema_are_unknown():
    # Position 6 is not declared by MagicAttackMultiAction.
    args = decode(schema("MagicAttackMultiAction"), [100, 1, 0, 2, 0, 42])

    assert dict(args.unknown) == {6: 42}
    assert args.is_same_target == 0


def test_empty_vector_decodes_to_empty_result():
    args = decode(schema("PhysicalAttackMultiWithMultiElementAction"), [])

    assert args.damage_factor is None
    assert args.critical is None
    assert args.damage_calculate_param_adjust_conf == (0,) * 7
    assert dict(args.unknown) == {}


def test_populated_lists_only_values_present():
    args = decode(schema("PhysicalAttackElementAction"), [500, 2])

    assert args.populated() == {"damage_factor": 500, "atk_element": 2}


def test_zero_values_count_as_populated():
    args = decode(schema("HealHpAction"), [2, 1, 0])

    assert args.populated() == {"factor": 2, "matk_element": 1, "damage_factor": 0}


def test_decoded_args_are_immutable():
    args = decode(schema("HealHpAction"), [2, 1, 0, 9])

    with pytest.raises(AttributeError):
        args.factor = 5
    with pytest.raises(TypeError):
        args.unknown[9] = 1


def test_decode_returns_named_args():
    assert isinstance(decode(schema("HealHpAction"), []), NamedArgs)
