from dataclasses import dataclass
from typing import Literal

Operation = Literal["multiply", "divide"]


@dataclass(frozen=True)
class Conversion:
    """One raw-unit to SI-unit rule for a marker."""

    factor: float
    operation: Operation
    si_unit: str


@dataclass(frozen=True)
class SIValue:
    """A value expressed in its SI unit (or passed through unconverted)."""

    value: float | str | None
    unit: str
