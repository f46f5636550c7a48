"""Competition disciplines and their fixed timing parameters.

Disciplines
-----------
STA   Static Apnea. No depth phase; the performance only ends on a
      manual stop.
DYN   Dynamic Apnea, 10 s bottom time window.
CWT   Constant Weight, 30 s bottom time window.

The table is static; nothing here is mutable at runtime.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .exceptions import UnknownDiscipline


# ── enums ─────────────────────────────────────────────────────────────────


class DisciplineCode(Enum):
    STA = "STA"
    DYN = "DYN"
    CWT = "CWT"


# ── config ────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class DisciplineConfig:
    """Timing parameters for one discipline (all values in seconds)."""

    code: DisciplineCode
    name: str
    official_top_seconds: int
    surface_protocol_seconds: int
    max_performance_seconds: int
    bottom_time_seconds: int | None = None

    def __post_init__(self) -> None:
        durations = {
            "official_top_seconds": self.official_top_seconds,
            "surface_protocol_seconds": self.surface_protocol_seconds,
            "max_performance_seconds": self.max_performance_seconds,
        }
        if self.bottom_time_seconds is not None:
            durations["bottom_time_seconds"] = self.bottom_time_seconds
        for field_name, value in durations.items():
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                raise ValueError(f"{field_name} must be a positive int, got {value!r}")
        if (
            self.bottom_time_seconds is not None
            and self.bottom_time_seconds >= self.max_performance_seconds
        ):
            raise ValueError("bottom_time_seconds must be below max_performance_seconds")

    @property
    def has_bottom_time(self) -> bool:
        return self.bottom_time_seconds is not None


DISCIPLINES: dict[DisciplineCode, DisciplineConfig] = {
    DisciplineCode.STA: DisciplineConfig(
        code=DisciplineCode.STA,
        name="Static Apnea (STA)",
        official_top_seconds=30,
        surface_protocol_seconds=15,
        max_performance_seconds=600,
    ),
    DisciplineCode.DYN: DisciplineConfig(
        code=DisciplineCode.DYN,
        name="Dynamic Apnea (DYN)",
        official_top_seconds=30,
        bottom_time_seconds=10,
        surface_protocol_seconds=15,
        max_performance_seconds=300,
    ),
    DisciplineCode.CWT: DisciplineConfig(
        code=DisciplineCode.CWT,
        name="Constant Weight (CWT)",
        official_top_seconds=30,
        bottom_time_seconds=30,
        surface_protocol_seconds=15,
        max_performance_seconds=240,
    ),
}


# ── registry ──────────────────────────────────────────────────────────────


class DisciplineRegistry:
    """Read-only lookup of discipline configs by code."""

    def __init__(self, table: dict[DisciplineCode, DisciplineConfig] | None = None) -> None:
        self._table = dict(DISCIPLINES if table is None else table)

    def get(self, code: DisciplineCode | str) -> DisciplineConfig:
        """Return the config for *code*.

        Strings are matched case-insensitively ("dyn" works).  Anything
        else raises :class:`UnknownDiscipline`.
        """
        key = self._normalize(code)
        if key is None or key not in self._table:
            raise UnknownDiscipline(code)
        return self._table[key]

    def codes(self) -> tuple[DisciplineCode, ...]:
        return tuple(self._table)

    def __contains__(self, code: object) -> bool:
        key = self._normalize(code)
        return key is not None and key in self._table

    def __iter__(self):
        return iter(self._table.values())

    def __len__(self) -> int:
        return len(self._table)

    @staticmethod
    def _normalize(code: object) -> DisciplineCode | None:
        if isinstance(code, DisciplineCode):
            return code
        if isinstance(code, str):
            try:
                return DisciplineCode(code.strip().upper())
            except ValueError:
                return None
        return None


DEFAULT_REGISTRY = DisciplineRegistry()
