"""
Utility functions module.

Time Semantics:
- Price timestamps are epoch milliseconds, converted to aware UTC datetimes
- Day filters compare calendar dates in one configured timezone
- History lookbacks subtract calendar months from wall-clock now
"""
