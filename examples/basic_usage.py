#!/usr/bin/env python3
"""
Basic Usage Example - datefaker

This script demonstrates the basic usage of the date generator. It shows how to:
- Configure logging
- Build a seeded generator from configuration
- Generate dates from every kind of constraint
- Handle rejected requests

Run: python examples/basic_usage.py
"""

from datefaker import DateFormat, DateGenerator, InvalidIntervalError, MalformedDateError
from datefaker.logging import configure_logging


def show_builders(generator: DateGenerator) -> None:
    """Print one result per builder in both formats."""
    print("\n📅 Builders")
    print("-" * 40)
    samples = {
        "between": lambda f: generator.between("2020-01-01T00:00:00Z", "2021-01-01T00:00:00Z", f),
        "between_timestamps": lambda f: generator.between_timestamps(0, 86400, f),
        "anytime": generator.anytime,
        "future(2)": lambda f: generator.future(2, f),
        "past(2)": lambda f: generator.past(2, f),
        "soon(7)": lambda f: generator.soon(7, f),
        "recent(7)": lambda f: generator.recent(7, f),
        "birthdate_by_age(18, 30)": lambda f: generator.birthdate_by_age(18, 30, f),
        "birthdate_by_year(1990, 1999)": lambda f: generator.birthdate_by_year(1990, 1999, f),
    }
    for name, build in samples.items():
        print(f"  {name:32} {build(DateFormat.ISO8601):22} {build(DateFormat.TIMESTAMP)}")


def show_vocabulary(generator: DateGenerator) -> None:
    """Print calendar vocabulary samples."""
    print("\n🗓️  Vocabulary")
    print("-" * 40)
    print(f"  weekday   {generator.weekday_name()} / {generator.weekday_abbreviated_name()}")
    print(f"  month     {generator.month_name()} / {generator.month_abbreviated_name()}")
    print(f"  timezone  {generator.timezone_abbreviation()}")
    print(f"  fields    {generator.year()}-{generator.month():02d}-{generator.day_of_month():02d} "
          f"{generator.time()}:{generator.second():02d} (weekday #{generator.day_of_week()})")


def show_errors(generator: DateGenerator) -> None:
    """Show typed errors for rejected requests."""
    print("\n⚠️  Rejected requests")
    print("-" * 40)
    try:
        generator.birthdate_by_age(60, 20)
    except InvalidIntervalError as e:
        print(f"  InvalidIntervalError: {e}")

    try:
        generator.between("2024-13-01T00:00:00Z", "2025-01-01T00:00:00Z")
    except MalformedDateError as e:
        print(f"  MalformedDateError: {e}")


def main() -> None:
    configure_logging(level="WARNING")

    print("🚀 datefaker basic usage")
    print("=" * 40)

    generator = DateGenerator.create(seed=42)
    show_builders(generator)
    show_vocabulary(generator)
    show_errors(generator)

    print("\n✅ Done")


if __name__ == "__main__":
    main()
