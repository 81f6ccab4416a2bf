import pytest

from battleargs.args import NamedArgs
from battleargs.exceptions import SchemaError, UnknownActionError
from battleargs.schema import ActionSchema, DamageFormula, SchemaRegistry


def base(battle_data, options, args):
    return "Base"


def always(battle_data, options, args):
    return "extra"


def never(battle_data, options, args):
    return None


def make_schema(name="TestAction", **kwargs):
    return ActionSchema(name=name, formatter=base, **kwargs)


class TestValidation:
    def test_rejects_two_fields_on_one_position(self):
        with pytest.raises(SchemaError, match="both claim position 1"):
            make_schema(args={"damage_factor": 1, "barrage_num": 1})

    def test_rejects_unknown_field_names(self):
        with pytest.raises(SchemaError, match="unknown field names"):
            make_schema(args={"damageFactor": 1})

    def test_rejects_multi_field_reusing_scalar_position(self):
        with pytest.raises(SchemaError, match="reuses position 2"):
            make_schema(
                args={"damage_factor": 1, "barrage_num": 2},
                multi_args={"damage_calculate_param_adjust_conf": (2, 3)},
            )

    def test_rejects_zero_based_positions(self):
        with pytest.raises(SchemaError, match="1-based"):
            make_schema(args={"damage_factor": 0})

    def test_rejects_pending_fields_that_are_not_declared(self):
        with pytest.raises(SchemaError, match="pending"):
            make_schema(args={"damage_factor": 1}, pending=frozenset({"critical"}))

    def test_rejects_field_declared_twice(self):
        with pytest.raises(SchemaError, match="both scalar and multi-value"):
            make_schema(args={"elements": 1}, multi_args={"elements": (2, 3)})

    def test_allows_gaps_between_positions(self):
        schema = make_schema(args={"damage_factor": 1, "critical": 17})
        assert schema.claimed_positions() == {1, 17}


def test_claimed_positions_include_multi_fields():
    schema = make_schema(
        args={"damage_factor": 1},
        multi_args={"damage_calculate_param_adjust_conf": (4, 5)},
    )
    assert schema.claimed_positions() == {1, 4, 5}


def test_schema_tables_are_read_only():
    schema = make_schema(args={"damage_factor": 1})
    with pytest.raises(TypeError):
        schema.args["critical"] = 2


def test_format_appends_clauses_that_return_text():
    schema = make_schema(clauses=(always, never, always))
    assert schema.format(None, {}, NamedArgs()) == "Base, extra, extra"


def test_formula_defaults_to_absent():
    assert make_schema().formula is None
    assert make_schema(formula=DamageFormula.HYBRID).formula.value == "Hybrid"


class TestRegistry:
    def test_lookup_returns_schema_or_none(self):
        schema = make_schema()
        registry = SchemaRegistry([schema])

        assert registry.lookup("TestAction") is schema
        assert registry.lookup("Nope") is None
        assert "TestAction" in registry
        assert len(registry) == 1
        assert list(registry) == [schema]

    def test_require_raises_for_unknown_action(self):
        registry = SchemaRegistry([])
        with pytest.raises(UnknownActionError) as excinfo:
            registry.require("MysteryAction")
        assert excinfo.value.action == "MysteryAction"

    def test_duplicate_names_are_rejected(self):
        with pytest.raises(SchemaError, match="Duplicate"):
            SchemaRegistry([make_schema(), make_schema()])

    def test_undocumented_lists_missing_names_sorted(self):
        registry = SchemaRegistry([make_schema("B"), make_schema("D")])
        assert registry.undocumented(["D", "C", "A", "B", "C"]) == ("A", "C")

    def test_names_are_sorted(self):
        registry = SchemaRegistry([make_schema("B"), make_schema("A")])
        assert registry.names() == ("A", "B")
