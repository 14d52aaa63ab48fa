"""Frozen truck configuration and option-code validation."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict

import numpy as np

from pickup_patterns.config.constants import OPTION_DOMAINS
from pickup_patterns.errors import OptionDomainError


def validate_option(field: str, value) -> int:
    """Check an option code against its enumeration and return it as a plain int.

    Accepts enum members and integers (including numpy integers). Booleans are
    rejected even though they are ints.

    Raises:
        OptionDomainError: if the value is not a member of the field's domain.
    """
    domain = OPTION_DOMAINS[field]
    allowed = sorted(member.value for member in domain)
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise OptionDomainError(field, value, allowed)
    code = int(value)
    if code not in allowed:
        raise OptionDomainError(field, value, allowed)
    return code


@dataclass(frozen=True)
class TruckConfig:
    """The four option codes selected for a truck. Immutable once built."""

    engine: int
    transmission: int
    trim: int
    package_type: int

    def __post_init__(self):
        for field, value in asdict(self).items():
            object.__setattr__(self, field, validate_option(field, value))

    def describe(self) -> Dict[str, str]:
        """Option names keyed by field, e.g. {"engine": "V6", ...}."""
        return {
            field: OPTION_DOMAINS[field](code).name
            for field, code in asdict(self).items()
        }
