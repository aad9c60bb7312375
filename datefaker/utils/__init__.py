"""
Utility functions module.

Time Semantics:
- All instants are UTC and carry whole-second resolution
- "Now" is read once per generation request and passed down explicitly
- Offsets that leave years 0001-9999 raise RangeOverflowError
"""
