"""
Date generator facade.

Bundles the collaborators every generation request needs (random source,
clock and configuration) and exposes the builders and vocabulary accessors
as methods. A process-wide default generator backs the module-level
functions re-exported by the package.
"""

from datetime import datetime
from pathlib import Path
from typing import Any, Optional, Union

import structlog

from .config.defaults import DefaultConfig, config_from_dict, get_default_config
from .config.loader import ConfigLoader
from .config.validation import ConfigValidator
from .dates import builders, vocabulary
from .dates.models import DateFormat
from .rng.source import RandomSource, SeededRandomSource
from .utils.time import Clock, utc_now

logger = structlog.get_logger(__name__)

FormatArg = Optional[Union[DateFormat, str]]


class DateGenerator:
    """
    Random date generator bound to one source, clock and configuration.

    Each builder method reads the clock once, so both interval bounds come
    from the same snapshot of "now".
    """

    def __init__(
        self,
        source: Optional[RandomSource] = None,
        clock: Optional[Clock] = None,
        config: Optional[DefaultConfig] = None,
    ) -> None:
        self.config = config or get_default_config()
        self.source = source if source is not None else SeededRandomSource(self.config.generator.seed)
        self.clock = clock
        self.default_format = DateFormat(self.config.generator.default_format)

    @classmethod
    def create(
        cls,
        config_dir: Optional[Union[str, Path]] = None,
        seed: Optional[int] = None,
        overrides: Optional[dict[str, Any]] = None,
        clock: Optional[Clock] = None,
    ) -> "DateGenerator":
        """
        Build a generator from YAML configuration.

        Raises:
            ValueError: If the merged configuration fails validation
        """
        loader = ConfigLoader.create(Path(config_dir) if config_dir is not None else None)
        overrides = dict(overrides or {})
        if seed is not None:
            overrides["generator"] = {**overrides.get("generator", {}), "seed": seed}
        merged = loader.merge_config(overrides)

        errors = ConfigValidator.validate_config(merged)
        if errors:
            logger.error(
                "Invalid generator configuration",
                config_dir=str(loader.config_dir),
                errors=[f"{e.field}: {e.message}" for e in errors],
            )
            raise ValueError(
                "Invalid configuration: " + "; ".join(f"{e.field}: {e.message} (value: {e.value!r})" for e in errors)
            )

        config = config_from_dict(merged)
        logger.info("Date generator created", seed=config.generator.seed,
                    default_format=config.generator.default_format)
        return cls(clock=clock, config=config)

    def seed(self, value: Optional[int]) -> None:
        """Reseed the underlying source when it supports reseeding."""
        reseed = getattr(self.source, "reseed", None)
        if reseed is None:
            raise TypeError(f"{type(self.source).__name__} cannot be reseeded")
        reseed(value)

    def now(self) -> datetime:
        return utc_now(self.clock)

    def _format(self, date_format: FormatArg) -> DateFormat:
        return self.default_format if date_format is None else DateFormat(date_format)

    def between(self, from_date: str, to_date: str, date_format: FormatArg = None) -> str:
        return builders.between(self.source, from_date, to_date, self._format(date_format))

    def between_timestamps(self, from_timestamp: int, to_timestamp: int, date_format: FormatArg = None) -> str:
        return builders.between_timestamps(self.source, from_timestamp, to_timestamp, self._format(date_format))

    def anytime(self, date_format: FormatArg = None) -> str:
        return builders.anytime(self.source, self._format(date_format), self.now(), self.config.ranges)

    def future(self, years: int = 1, date_format: FormatArg = None) -> str:
        return builders.future(self.source, years, self._format(date_format), self.now(), self.config.ranges)

    def past(self, years: int = 1, date_format: FormatArg = None) -> str:
        return builders.past(self.source, years, self._format(date_format), self.now(), self.config.ranges)

    def soon(self, days: int = 3, date_format: FormatArg = None) -> str:
        return builders.soon(self.source, days, self._format(date_format), self.now(), self.config.ranges)

    def recent(self, days: int = 3, date_format: FormatArg = None) -> str:
        return builders.recent(self.source, days, self._format(date_format), self.now(), self.config.ranges)

    def birthdate_by_age(self, min_age: int = 18, max_age: int = 80, date_format: FormatArg = None) -> str:
        return builders.birthdate_by_age(
            self.source, min_age, max_age, self._format(date_format), self.now(), self.config.ranges
        )

    def birthdate_by_year(self, min_year: int = 1920, max_year: int = 2000, date_format: FormatArg = None) -> str:
        return builders.birthdate_by_year(self.source, min_year, max_year, self._format(date_format))

    def weekday_name(self) -> str:
        return vocabulary.weekday_name(self.source)

    def weekday_abbreviated_name(self) -> str:
        return vocabulary.weekday_abbreviated_name(self.source)

    def month_name(self) -> str:
        return vocabulary.month_name(self.source)

    def month_abbreviated_name(self) -> str:
        return vocabulary.month_abbreviated_name(self.source)

    def timezone_abbreviation(self) -> str:
        return vocabulary.timezone_abbreviation(self.source)

    def year(self) -> int:
        return vocabulary.year(self.source, self.config.vocabulary)

    def month(self) -> int:
        return vocabulary.month(self.source)

    def hour(self) -> int:
        return vocabulary.hour(self.source)

    def minute(self) -> int:
        return vocabulary.minute(self.source)

    def second(self) -> int:
        return vocabulary.second(self.source)

    def day_of_month(self) -> int:
        return vocabulary.day_of_month(self.source)

    def day_of_week(self) -> int:
        return vocabulary.day_of_week(self.source)

    def time(self) -> str:
        return vocabulary.time(self.source)


# Global generator instance
default_generator = DateGenerator()

seed = default_generator.seed
between = default_generator.between
between_timestamps = default_generator.between_timestamps
anytime = default_generator.anytime
future = default_generator.future
past = default_generator.past
soon = default_generator.soon
recent = default_generator.recent
birthdate_by_age = default_generator.birthdate_by_age
birthdate_by_year = default_generator.birthdate_by_year
weekday_name = default_generator.weekday_name
weekday_abbreviated_name = default_generator.weekday_abbreviated_name
month_name = default_generator.month_name
month_abbreviated_name = default_generator.month_abbreviated_name
timezone_abbreviation = default_generator.timezone_abbreviation
year = default_generator.year
month = default_generator.month
hour = default_generator.hour
minute = default_generator.minute
second = default_generator.second
day_of_month = default_generator.day_of_month
day_of_week = default_generator.day_of_week
time = default_generator.time
