"""
Contract Validation Module

Модуль для валидации JSON контрактов numeric-drills.
"""

from .validators import (
    SCHEMA_DIR,
    CalculatorInputValidator,
    ContractValidator,
    SchemaLoader,
    validate_calculator_input,
)

__all__ = [
    # Constants
    "SCHEMA_DIR",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "CalculatorInputValidator",
    # Functions
    "validate_calculator_input",
]
