"""Declarative argument schemas keyed by action type name."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import (
    TYPE_CHECKING,
    Callable,
    FrozenSet,
    Iterable,
    Iterator,
    Mapping,
    Optional,
    Set,
    Tuple,
)

from .args import NamedArgs, field_names
from .exceptions import SchemaError, UnknownActionError

if TYPE_CHECKING:
    from .battle_data import BattleData

Options = Mapping[str, str]
Formatter = Callable[["BattleData", Options, NamedArgs], str]
Clause = Callable[["BattleData", Options, NamedArgs], Optional[str]]


class DamageFormula(str, Enum):
    """Which stat an action's damage or healing scales with."""

    PHYSICAL = "Physical"
    MAGICAL = "Magical"
    HYBRID = "Hybrid"


@dataclass(frozen=True)
class ActionSchema:
    """Field layout and renderer for one action type.

    ``args`` maps scalar fields to 1-based positions in the raw vector and
    ``multi_args`` maps multi-value fields to an ordered group of positions.
    ``pending`` names fields that are decoded but that the formatter does not
    interpret yet.
    """

    name: str
    formatter: Formatter
    args: Mapping[str, int] = field(default_factory=dict)
    multi_args: Mapping[str, Tuple[int, ...]] = field(default_factory=dict)
    formula: Optional[DamageFormula] = None
    clauses: Tuple[Clause, ...] = ()
    pending: FrozenSet[str] = frozenset()

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", MappingProxyType(dict(self.args)))
        object.__setattr__(
            self,
            "multi_args",
            MappingProxyType({name: tuple(positions) for name, positions in self.multi_args.items()}),
        )
        object.__setattr__(self, "clauses", tuple(self.clauses))
        object.__setattr__(self, "pending", frozenset(self.pending))
        self._validate()

    def _validate(self) -> None:
        known = field_names()
        declared = set(self.args) | set(self.multi_args)

        overlap = set(self.args) & set(self.multi_args)
        if overlap:
            raise SchemaError(f"{self.name}: fields declared both scalar and multi-value: {sorted(overlap)}")

        unknown = declared - known
        if unknown:
            raise SchemaError(f"{self.name}: unknown field names {sorted(unknown)}")

        owners: dict[int, str] = {}
        for name, position in self.args.items():
            if position < 1:
                raise SchemaError(f"{self.name}: position {position} of {name} must be 1-based")
            if position in owners:
                raise SchemaError(
                    f"{self.name}: {name} and {owners[position]} both claim position {position}"
                )
            owners[position] = name

        for name, positions in self.multi_args.items():
            for position in positions:
                if position < 1:
                    raise SchemaError(f"{self.name}: position {position} of {name} must be 1-based")
                if position in owners:
                    raise SchemaError(
                        f"{self.name}: {name} reuses position {position} of scalar field {owners[position]}"
                    )

        stray = self.pending - declared
        if stray:
            raise SchemaError(f"{self.name}: pending fields are not declared: {sorted(stray)}")

    def claimed_positions(self) -> Set[int]:
        """Return every raw position this schema reads."""

        claimed = set(self.args.values())
        for positions in self.multi_args.values():
            claimed.update(positions)
        return claimed

    def format(self, battle_data: BattleData, options: Options, args: NamedArgs) -> str:
        """Render the base text followed by every clause that applies."""

        text = self.formatter(battle_data, options, args)
        for clause in self.clauses:
            extra = clause(battle_data, options, args)
            if extra:
                text += ", " + extra
        return text


class SchemaRegistry:
    """Immutable lookup table from action type name to schema."""

    def __init__(self, schemas: Iterable[ActionSchema]) -> None:
        table: dict[str, ActionSchema] = {}
        for schema in schemas:
            if schema.name in table:
                raise SchemaError(f"Duplicate schema for action type: {schema.name}")
            table[schema.name] = schema
        self._schemas: Mapping[str, ActionSchema] = MappingProxyType(table)

    def lookup(self, action: str) -> Optional[ActionSchema]:
        """Return the schema for ``action`` or ``None`` when it is not known."""

        return self._schemas.get(action)

    def require(self, action: str) -> ActionSchema:
        schema = self.lookup(action)
        if schema is None:
            raise UnknownActionError(action)
        return schema

    def names(self) -> Tuple[str, ...]:
        return tuple(sorted(self._schemas))

    def undocumented(self, actions: Iterable[str]) -> Tuple[str, ...]:
        """Return the action names from ``actions`` that have no schema, sorted."""

        return tuple(sorted({action for action in actions if action not in self._schemas}))

    def __contains__(self, action: object) -> bool:
        return action in self._schemas

    def __iter__(self) -> Iterator[ActionSchema]:
        return iter(self._schemas.values())

    def __len__(self) -> int:
        return len(self._schemas)


__all__ = [
    "ActionSchema",
    "Clause",
    "DamageFormula",
    "Formatter",
    "Options",
    "SchemaRegistry",
]
