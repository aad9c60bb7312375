#!/usr/bin/env python3
"""Lightweight smoke test for datefaker.

Executes the example scripts under ``examples/`` as a functional smoke-test
suite. If all of them complete without raising an exception, the script
exits with status code 0. Otherwise it prints a summary of the errors and
exits with 1.

Usage:
    python scripts/smoke_test.py
"""
from __future__ import annotations

import importlib.util
import pathlib
import sys
import time
import traceback
from typing import List, Tuple

ROOT_DIR = pathlib.Path(__file__).resolve().parent.parent
EXAMPLES_DIR = ROOT_DIR / "examples"

EXAMPLE_FILES: List[Tuple[str, str]] = [
    ("Basic Usage", "basic_usage.py"),
]


def run_example(name: str, filename: str) -> bool:
    """Import and execute an example script.

    Returns True if the script completed successfully, False otherwise.
    """
    path = EXAMPLES_DIR / filename
    print("\n" + "=" * 60)
    print(f"🚀 Running smoke example: {name} ({filename})")
    print("=" * 60)

    if not path.exists():
        print(f"❌ File not found: {path}")
        return False

    start = time.time()
    try:
        spec = importlib.util.spec_from_file_location(name, path)
        module = importlib.util.module_from_spec(spec)  # type: ignore[arg-type]
        assert spec.loader is not None  # for mypy
        spec.loader.exec_module(module)  # type: ignore[misc]

        # If the example defines a main() function, call it explicitly
        if hasattr(module, "main") and callable(module.main):  # type: ignore[attr-defined]
            module.main()  # type: ignore[attr-defined]

        duration = time.time() - start
        print(f"✅ {name} completed in {duration:.2f}s")
        return True

    except Exception as exc:  # pylint: disable=broad-except
        duration = time.time() - start
        print(f"❌ {name} failed after {duration:.2f}s: {exc}")
        traceback.print_exc()
        return False


def main() -> None:
    print("🧪 datefaker smoke-test suite")
    print("=" * 60)

    sys.path.insert(0, str(ROOT_DIR))

    successes = 0
    for name, filename in EXAMPLE_FILES:
        if run_example(name, filename):
            successes += 1

    total = len(EXAMPLE_FILES)
    print("\n" + "=" * 60)
    print("📋 Smoke-test summary")
    print("=" * 60)
    print(f"Total examples: {total}")
    print(f"Successful   : {successes}")
    print(f"Failed       : {total - successes}")

    if successes == total:
        print("🎉 All smoke-tests passed!")
        sys.exit(0)
    else:
        print("⚠️  Smoke-tests failed.  See logs above.")
        sys.exit(1)


if __name__ == "__main__":
    main()
