"""Default configuration parameters for date generation."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RangeParams:
    """Calendar constants used to turn constraints into intervals."""
    days_per_year: int = 365                # No leap-year correction in year offsets
    hours_per_day: int = 24
    boundary_offset_hours: int = 1          # Keeps future/past results off "now"
    anytime_years: int = 200                # Horizon past "now" for anytime()


@dataclass(frozen=True)
class VocabularyParams:
    """Bounds for the loose calendar field generators."""
    min_year: int = 1950
    max_year: int = 2050


@dataclass(frozen=True)
class GeneratorParams:
    """Generator construction parameters."""
    seed: Optional[int] = None
    default_format: str = "iso8601"


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    ranges: RangeParams
    vocabulary: VocabularyParams
    generator: GeneratorParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        ranges=RangeParams(),
        vocabulary=VocabularyParams(),
        generator=GeneratorParams(),
    )


def config_from_dict(config: dict) -> DefaultConfig:
    """Build a DefaultConfig from a merged configuration dictionary."""
    return DefaultConfig(
        ranges=RangeParams(**config.get("ranges", {})),
        vocabulary=VocabularyParams(**config.get("vocabulary", {})),
        generator=GeneratorParams(**config.get("generator", {})),
    )
