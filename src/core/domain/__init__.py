"""
Domain models and value objects.

Contains the operation selector and the calculator request/result models.
"""

from src.core.domain.calculation import CalculationRequest, CalculationResult
from src.core.domain.operation import OperationSelector, operation_menu

__all__ = [
    # Operation
    "OperationSelector",
    "operation_menu",
    # Calculation models
    "CalculationRequest",
    "CalculationResult",
]
