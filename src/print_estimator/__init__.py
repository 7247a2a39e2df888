"""Cost and time estimation for FDM 3D print quotes."""

from .errors import ConfigError, EstimatorError, InvalidInputError, ZeroFlowRateError
from .estimator import estimate
from .models import EstimateResult, PartParameters, PrinterSettings
from .profiles import get_part_preset, get_printer_preset

__all__ = [
    "estimate",
    "PrinterSettings",
    "PartParameters",
    "EstimateResult",
    "get_printer_preset",
    "get_part_preset",
    "EstimatorError",
    "InvalidInputError",
    "ZeroFlowRateError",
    "ConfigError",
]
