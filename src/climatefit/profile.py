"""Ideal climate profile configuration.

This module defines the ClimateProfile dataclass used to filter and score
locations. Profiles are plain values: they can be built in code, loaded from
JSON, or assembled from CLI flags.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from enum import Enum
from pathlib import Path
from typing import Any


class PrecipLevel(str, Enum):
    """Coarse precipitation preference."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    @property
    def reference_mm(self) -> float:
        """Reference monthly precipitation in millimeters."""
        return PRECIP_REFERENCE_MM[self]

    @classmethod
    def parse(cls, value: str | PrecipLevel) -> PrecipLevel:
        """Parse "Low"/"Medium"/"High" (any case) into a level."""
        if isinstance(value, cls):
            return value
        for level in cls:
            if level.value.lower() == str(value).strip().lower():
                return level
        valid = ", ".join(level.value for level in cls)
        raise ValueError(f"Unknown precipitation level {value!r} (expected one of: {valid})")


# Low is dry, Medium is roughly the dataset average, High is near the top
PRECIP_REFERENCE_MM: dict[PrecipLevel, float] = {
    PrecipLevel.LOW: 0.0,
    PrecipLevel.MEDIUM: 94.0,
    PrecipLevel.HIGH: 300.0,
}


@dataclass(frozen=True)
class ClimateProfile:
    """Target climate used for ranking locations.

    Attributes:
        ideal_temp_f: Preferred monthly average temperature in Fahrenheit
        ideal_precipitation: Preferred precipitation level
        ideal_avg_temp_fluctuation: Half-width of the accepted band around
            ideal_temp_f for tempAvgF (inclusive)
        ideal_min_max_fluctuation: Upper bound on tempMaxF - tempMinF
            (exclusive)
    """

    ideal_temp_f: float
    ideal_precipitation: PrecipLevel
    ideal_avg_temp_fluctuation: float
    ideal_min_max_fluctuation: float

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        object.__setattr__(
            self, "ideal_precipitation", PrecipLevel.parse(self.ideal_precipitation)
        )
        self._validate()

    def _validate(self) -> None:
        errors = []

        if self.ideal_avg_temp_fluctuation < 0:
            errors.append(
                "ideal_avg_temp_fluctuation must be >= 0, "
                f"got {self.ideal_avg_temp_fluctuation}"
            )
        if self.ideal_min_max_fluctuation < 0:
            errors.append(
                "ideal_min_max_fluctuation must be >= 0, "
                f"got {self.ideal_min_max_fluctuation}"
            )

        if errors:
            raise ValueError("ClimateProfile validation failed:\n  - " + "\n  - ".join(errors))

    @property
    def avg_temp_band(self) -> tuple[float, float]:
        """Inclusive (low, high) bounds for tempAvgF."""
        return (
            self.ideal_temp_f - self.ideal_avg_temp_fluctuation,
            self.ideal_temp_f + self.ideal_avg_temp_fluctuation,
        )

    @property
    def precipitation_reference_mm(self) -> float:
        return self.ideal_precipitation.reference_mm

    def to_dict(self) -> dict[str, Any]:
        """Convert profile to dictionary for JSON serialization."""
        d = asdict(self)
        d["ideal_precipitation"] = self.ideal_precipitation.value
        return d

    def to_json(self, indent: int = 2) -> str:
        """Serialize profile to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    def save(self, path: Path | str) -> Path:
        """Save profile to JSON file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.to_json())
        return path

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> ClimateProfile:
        """Create profile from dictionary."""
        d = d.copy()
        if "ideal_precipitation" in d:
            d["ideal_precipitation"] = PrecipLevel.parse(d["ideal_precipitation"])
        return cls(**d)

    @classmethod
    def from_json(cls, json_str: str) -> ClimateProfile:
        """Create profile from JSON string."""
        return cls.from_dict(json.loads(json_str))

    @classmethod
    def load(cls, path: Path | str) -> ClimateProfile:
        """Load profile from JSON file."""
        path = Path(path)
        return cls.from_json(path.read_text())


DEFAULT_PROFILE = ClimateProfile(
    ideal_temp_f=70.0,
    ideal_precipitation=PrecipLevel.LOW,
    ideal_avg_temp_fluctuation=5.0,
    ideal_min_max_fluctuation=20.0,
)
