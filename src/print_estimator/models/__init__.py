"""Data records for print estimation.

This package contains the input records and the estimate snapshot.
"""

from print_estimator.models.part import PartParameters
from print_estimator.models.printer import PrinterSettings
from print_estimator.models.result import EstimateResult

__all__ = [
    "PrinterSettings",
    "PartParameters",
    "EstimateResult",
]
