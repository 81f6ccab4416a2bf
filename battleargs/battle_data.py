"""Read-only battle configuration data consumed by the formatters.

Everything here is loaded once per locale and then shared by every decode and
format call: the target range table, the attack type constant that marks
ranged attacks, and the status ailment catalog.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional, Protocol, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .exceptions import DataFileError
from .logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_DATA_FILE = "battle_data.yaml"


class TargetCategory(str, Enum):
    """Who an action affects, as resolved from a target range code."""

    SELF = "SELF"
    SINGLE = "SINGLE"
    RANDOM = "RANDOM"
    COLLECTIVE = "COLLECTIVE"
    ALL = "ALL"
    PARTY = "PARTY"
    SINGLE_ALLY = "SINGLE_ALLY"


@dataclass(frozen=True)
class StatusDescription:
    """Rendered description of a status ailment or status bundle."""

    description: str
    verb: str = "grants"


class StatusCatalog(Protocol):
    """Lookup of status ailment descriptions by id."""

    def describe_single(self, status_id: int) -> Optional[StatusDescription]:
        ...

    def describe_bundle(self, bundle_id: int) -> Optional[StatusDescription]:
        ...


@dataclass(frozen=True)
class MappingStatusCatalog:
    """Status catalog backed by two in-memory tables."""

    statuses: Mapping[int, StatusDescription] = field(default_factory=dict)
    bundles: Mapping[int, StatusDescription] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "statuses", MappingProxyType(dict(self.statuses)))
        object.__setattr__(self, "bundles", MappingProxyType(dict(self.bundles)))

    def describe_single(self, status_id: int) -> Optional[StatusDescription]:
        return self.statuses.get(status_id)

    def describe_bundle(self, bundle_id: int) -> Optional[StatusDescription]:
        return self.bundles.get(bundle_id)


@dataclass(frozen=True)
class BattleData:
    """Battle configuration for one locale."""

    target_ranges: Mapping[str, TargetCategory]
    indirect_atk_type: int
    statuses: StatusCatalog = field(default_factory=MappingStatusCatalog)

    def __post_init__(self) -> None:
        object.__setattr__(self, "target_ranges", MappingProxyType(dict(self.target_ranges)))

    def target_range_category(self, code: Union[str, int, None]) -> Optional[TargetCategory]:
        """Resolve a target range code, or an already resolved category name."""

        if code is None:
            return None
        key = str(code)
        category = self.target_ranges.get(key)
        if category is not None:
            return category
        try:
            return TargetCategory(key.upper())
        except ValueError:
            return None


class StatusEntry(BaseModel):
    model_config = ConfigDict(extra="ignore")
    description: str
    beneficial: bool = True


class BundleEntry(BaseModel):
    model_config = ConfigDict(extra="ignore")
    description: str


class ConstantsSection(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)
    indirect_atk_type: int = Field(alias="ATK_TYPE_INDIRECT")


class BattleDataFile(BaseModel):
    """On-disk layout of a battle configuration file."""

    model_config = ConfigDict(extra="ignore")
    target_ranges: dict[str, TargetCategory] = Field(default_factory=dict)
    constants: ConstantsSection
    statuses: dict[int, StatusEntry] = Field(default_factory=dict)
    bundles: dict[int, BundleEntry] = Field(default_factory=dict)

    @field_validator("target_ranges", mode="before")
    @classmethod
    def _stringify_codes(cls, value: object) -> object:
        # Codes are looked up as strings.
        if isinstance(value, dict):
            return {str(code): category for code, category in value.items()}
        return value

    def to_battle_data(self) -> BattleData:
        catalog = MappingStatusCatalog(
            statuses={
                status_id: StatusDescription(
                    entry.description,
                    verb="grants" if entry.beneficial else "inflicts",
                )
                for status_id, entry in self.statuses.items()
            },
            bundles={
                bundle_id: StatusDescription(entry.description)
                for bundle_id, entry in self.bundles.items()
            },
        )
        return BattleData(
            target_ranges=self.target_ranges,
            indirect_atk_type=self.constants.indirect_atk_type,
            statuses=catalog,
        )


def parse_battle_data(raw: object, source: Union[str, Path] = "<memory>") -> BattleData:
    """Validate an already parsed configuration mapping."""

    try:
        parsed = BattleDataFile.model_validate(raw or {})
    except ValidationError as exc:
        raise DataFileError(source, str(exc)) from exc
    return parsed.to_battle_data()


def load_battle_data(path: Union[str, Path]) -> BattleData:
    """Load battle configuration from a YAML file.

    Raises:
        FileNotFoundError: If the file does not exist.
        DataFileError: If the file is not valid YAML or does not match the layout.
    """
    data_path = Path(path)
    if not data_path.exists():
        raise FileNotFoundError(f"Battle data file not found: {data_path}")

    try:
        with open(data_path, encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise DataFileError(data_path, str(exc)) from exc

    battle_data = parse_battle_data(raw, data_path)
    logger.debug("Loaded battle data from %s", data_path)
    return battle_data


def default_battle_data() -> BattleData:
    """Load the battle configuration bundled with the package."""

    text = resources.files("battleargs").joinpath("data").joinpath(DEFAULT_DATA_FILE).read_text(encoding="utf-8")
    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DataFileError(DEFAULT_DATA_FILE, str(exc)) from exc
    return parse_battle_data(raw, DEFAULT_DATA_FILE)


__all__ = [
    "BattleData",
    "BattleDataFile",
    "MappingStatusCatalog",
    "StatusCatalog",
    "StatusDescription",
    "TargetCategory",
    "default_battle_data",
    "load_battle_data",
    "parse_battle_data",
]
