from mosaic_plot.config import TicsConfig
from mosaic_plot.custom_tics import CustomTicSet, CustomTics
from mosaic_plot.engine import AxisTicsEngine
from mosaic_plot.errors import (
    AxisTicsError,
    DegenerateRangeError,
    InvalidRangeError,
    InvalidSpacingError,
    InvalidTicCeilingError,
)
from mosaic_plot.labels import format_tic, format_tics, major_labels, minor_labels, tic_decimals
from mosaic_plot.sampling import Sampling
from mosaic_plot.tics import (
    AxisTics,
    MajorTicLayout,
    MinorTicLayout,
    axis_tics_for_count,
    axis_tics_for_interval,
    compute_multiple,
    validate_range,
)

__all__ = [
    "AxisTics",
    "AxisTicsEngine",
    "AxisTicsError",
    "CustomTicSet",
    "CustomTics",
    "DegenerateRangeError",
    "InvalidRangeError",
    "InvalidSpacingError",
    "InvalidTicCeilingError",
    "MajorTicLayout",
    "MinorTicLayout",
    "Sampling",
    "TicsConfig",
    "axis_tics_for_count",
    "axis_tics_for_interval",
    "compute_multiple",
    "format_tic",
    "format_tics",
    "major_labels",
    "minor_labels",
    "tic_decimals",
    "validate_range",
]
