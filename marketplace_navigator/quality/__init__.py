"""
Data Quality Module
"""
from .integrity import (
    IntegrityValidator,
    ValidationCheck,
    ValidationResult,
    ValidationSeverity,
    ValidationStatus,
    create_integrity_validator,
    validate_snapshot,
)

__all__ = [
    "IntegrityValidator",
    "ValidationCheck",
    "ValidationResult",
    "ValidationSeverity",
    "ValidationStatus",
    "create_integrity_validator",
    "validate_snapshot",
]
