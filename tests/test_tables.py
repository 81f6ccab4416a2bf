import json

import pytest

from battleargs.exceptions import DataFileError
from battleargs.registry import DEFAULT_REGISTRY
from battleargs.tables import (
    ArgLayout,
    LangType,
    load_arg_tables,
    load_locale_tables,
    locale_table_path,
    parse_arg_tables,
)

SAMPLE_TABLE = {
    "PhysicalAttackMultiAction": {
        "args": {"damageFactor": 1, "barrageNum": 2},
        "multiArgs": {"damageCalculateParamAdjustConf": [10, 11]},
    },
    "TranceAction": {
        "args": {"wrappedAbilityId": 1},
        "multiArgs": {"spareReceptorIds": [3, 5]},
    },
    "HealHpAction": {"args": {"factor": 1}},
}


def write_table(root, lang, table):
    path = locale_table_path(root, lang)
    path.parent.mkdir(parents=True)
    path.write_text(json.dumps(table), encoding="utf-8")
    return path


def test_locale_table_path_layout(tmp_path):
    assert locale_table_path(tmp_path, LangType.JP) == tmp_path / "jp" / "battleArgs.json"


def test_load_arg_tables(tmp_path):
    path = write_table(tmp_path, LangType.GL, SAMPLE_TABLE)

    tables = load_arg_tables(path)

    assert set(tables) == set(SAMPLE_TABLE)
    assert tables["PhysicalAttackMultiAction"].args == {"damageFactor": 1, "barrageNum": 2}
    assert tables["PhysicalAttackMultiAction"].multi_args == {"damageCalculateParamAdjustConf": (10, 11)}
    assert tables["HealHpAction"].multi_args == {}


def test_load_every_locale(tmp_path):
    write_table(tmp_path, LangType.GL, SAMPLE_TABLE)
    write_table(tmp_path, LangType.JP, {"HealHpAction": {"args": {"factor": 1}}})

    tables = load_locale_tables(tmp_path)

    assert set(tables) == {LangType.GL, LangType.JP}
    assert list(tables[LangType.JP]) == ["HealHpAction"]


def test_registry_reports_actions_without_schema(tmp_path):
    tables = load_arg_tables(write_table(tmp_path, LangType.GL, SAMPLE_TABLE))

    assert DEFAULT_REGISTRY.undocumented(tables) == ("TranceAction",)


def test_missing_table_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_arg_tables(tmp_path / "gl" / "battleArgs.json")


def test_invalid_json_raises_data_file_error(tmp_path):
    path = tmp_path / "battleArgs.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(DataFileError):
        load_arg_tables(path)


@pytest.mark.parametrize(
    "raw",
    [
        [],
        {"HealHpAction": []},
        {"HealHpAction": {"args": {"factor": "first"}}},
        {"HealHpAction": {"multiArgs": {"elements": 3}}},
    ],
)
def test_malformed_tables_raise_data_file_error(raw):
    with pytest.raises(DataFileError):
        parse_arg_tables(raw)


def test_layouts_are_read_only():
    layout = ArgLayout(args={"factor": 1})
    with pytest.raises(TypeError):
        layout.args["factor"] = 2
