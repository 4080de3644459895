from __future__ import annotations


class AxisTicsError(ValueError):
    pass


class InvalidSpacingError(AxisTicsError):
    pass


class InvalidRangeError(AxisTicsError):
    pass


class DegenerateRangeError(InvalidRangeError):
    pass


class InvalidTicCeilingError(AxisTicsError):
    pass
