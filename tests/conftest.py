"""Shared fixtures for the battle action description tests."""

import logging

import pytest

from battleargs.battle_data import BattleData, MappingStatusCatalog, StatusDescription, TargetCategory


@pytest.fixture(autouse=True)
def _restore_root_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def status_catalog():
    return MappingStatusCatalog(
        statuses={
            200: StatusDescription("Poison", verb="inflicts"),
            206: StatusDescription("Blind", verb="inflicts"),
            260: StatusDescription("Haste"),
            270: StatusDescription("Protect"),
        },
        bundles={
            1: StatusDescription("negative status effects"),
            2: StatusDescription(""),
        },
    )


@pytest.fixture
def battle_data(status_catalog):
    return BattleData(
        target_ranges={
            "1": TargetCategory.SINGLE,
            "2": TargetCategory.RANDOM,
            "3": TargetCategory.COLLECTIVE,
            "5": TargetCategory.SELF,
        },
        indirect_atk_type=2,
        statuses=status_catalog,
    )
