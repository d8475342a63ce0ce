"""
Snapshot Integrity Validation

Reports on the soft invariants of a snapshot: ids unique within a table and
foreign keys that resolve to a record of the referenced table. Navigation
works regardless of the outcome; this report only tells how much of it will
fall back to raw identifiers.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

import polars as pl
import structlog

from marketplace_navigator.snapshot import FOREIGN_KEYS, ForeignKey, Snapshot, TableName

logger = structlog.get_logger(__name__)


class ValidationSeverity(str, Enum):
    """Severity levels for validation failures"""
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class ValidationStatus(str, Enum):
    """Overall validation status"""
    PASSED = "passed"
    FAILED = "failed"
    PARTIAL = "partial"


@dataclass
class ValidationCheck:
    """Single validation check result"""
    name: str
    passed: bool
    severity: ValidationSeverity
    message: str
    details: Optional[Dict[str, Any]] = None
    failed_rows: int = 0
    total_rows: int = 0


@dataclass
class ValidationResult:
    """Complete validation suite result"""
    status: ValidationStatus
    total_checks: int
    passed_checks: int
    failed_checks: int
    warning_count: int
    checks: List[ValidationCheck] = field(default_factory=list)
    started_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    completed_at: Optional[datetime] = None
    
    @property
    def success_rate(self) -> float:
        """Percentage of passed checks"""
        if self.total_checks == 0:
            return 100.0
        return (self.passed_checks / self.total_checks) * 100


def _key(value: Any) -> Optional[str]:
    # repr keeps 1 and "1" apart, matching how lookups compare ids
    return None if value is None else repr(value)


def table_frame(snapshot: Snapshot, table: TableName, columns: List[str]) -> pl.DataFrame:
    """
    Key columns of a table as a string-typed DataFrame.
    
    Values are encoded with `repr` so ids of different types never collide.
    """
    records = snapshot.table(table)
    return pl.DataFrame(
        {column: [_key(record.get(column)) for record in records] for column in columns},
        schema={column: pl.String for column in columns},
    )


class IntegrityValidator:
    """
    Referential integrity checks over a snapshot.
    
    Example:
        validator = IntegrityValidator()
        validator.add_unique_id_check(TableName.PRODUCTS)
        validator.add_foreign_key_check(fk)
        result = validator.validate(snapshot)
    """
    
    def __init__(self, strict_mode: bool = False):
        self.strict_mode = strict_mode
        self._checks: List[Callable[[Snapshot], Optional[ValidationCheck]]] = []
    
    def reset(self) -> None:
        """Reset validator state"""
        self._checks = []
    
    def add_unique_id_check(
        self,
        table: TableName,
        severity: ValidationSeverity = ValidationSeverity.ERROR,
    ) -> "IntegrityValidator":
        """Ids must be unique within the table; tables without ids are skipped"""
        def check(snapshot: Snapshot) -> Optional[ValidationCheck]:
            ids = table_frame(snapshot, table, ["id"])["id"].drop_nulls()
            if ids.len() == 0:
                return None
            
            duplicate_count = ids.len() - ids.n_unique()
            passed = duplicate_count == 0
            
            return ValidationCheck(
                name=f"unique_id_{table.value.lower()}",
                passed=passed,
                severity=severity,
                message=(
                    f"{table.value} has {duplicate_count} duplicate ids"
                    if not passed else f"{table.value} ids are unique"
                ),
                details={"unique_count": ids.n_unique(), "duplicate_count": duplicate_count},
                failed_rows=duplicate_count,
                total_rows=ids.len(),
            )
        
        self._checks.append(check)
        return self
    
    def add_foreign_key_check(
        self,
        foreign_key: ForeignKey,
        severity: ValidationSeverity = ValidationSeverity.WARNING,
    ) -> "IntegrityValidator":
        """Non-null key values must match an id of the referenced table"""
        def check(snapshot: Snapshot) -> Optional[ValidationCheck]:
            if not snapshot.table(foreign_key.table):
                return None
            
            column = foreign_key.column
            child = table_frame(snapshot, foreign_key.table, [column]).filter(
                pl.col(column).is_not_null()
            )
            parent = table_frame(snapshot, foreign_key.references, ["id"]).filter(
                pl.col("id").is_not_null()
            ).unique()
            
            orphans = child.join(parent, left_on=column, right_on="id", how="anti")
            orphan_count = orphans.height
            passed = orphan_count == 0
            
            return ValidationCheck(
                name=f"ref_integrity_{foreign_key.table.value.lower()}_{column}",
                passed=passed,
                severity=severity,
                message=(
                    f"{foreign_key.label} has {orphan_count} dangling references"
                    if not passed else "Referential integrity maintained"
                ),
                details={
                    "orphan_count": orphan_count,
                    "sample": orphans[column].head(5).to_list(),
                },
                failed_rows=orphan_count,
                total_rows=child.height,
            )
        
        self._checks.append(check)
        return self
    
    def validate(self, snapshot: Snapshot) -> ValidationResult:
        """
        Run all checks against a snapshot.
        
        Checks that do not apply (empty table, table without ids) are left
        out of the result.
        """
        started_at = datetime.now(timezone.utc)
        results = []
        
        logger.info(
            "Running integrity checks",
            checks=len(self._checks),
            records=snapshot.record_count,
        )
        
        for check_func in self._checks:
            result = check_func(snapshot)
            if result is None:
                continue
            results.append(result)
            
            if not result.passed:
                logger.warning(
                    f"Integrity check failed: {result.name}",
                    message=result.message,
                    severity=result.severity.value,
                )
        
        completed_at = datetime.now(timezone.utc)
        
        passed_checks = sum(1 for r in results if r.passed)
        failed_checks = sum(1 for r in results if not r.passed and r.severity == ValidationSeverity.ERROR)
        warning_count = sum(1 for r in results if not r.passed and r.severity == ValidationSeverity.WARNING)
        
        if failed_checks > 0:
            status = ValidationStatus.FAILED
        elif warning_count > 0 and self.strict_mode:
            status = ValidationStatus.FAILED
        elif warning_count > 0:
            status = ValidationStatus.PARTIAL
        else:
            status = ValidationStatus.PASSED
        
        validation_result = ValidationResult(
            status=status,
            total_checks=len(results),
            passed_checks=passed_checks,
            failed_checks=failed_checks,
            warning_count=warning_count,
            checks=results,
            started_at=started_at,
            completed_at=completed_at,
        )
        
        logger.info(
            f"Integrity validation complete: {status.value}",
            passed=passed_checks,
            failed=failed_checks,
            warnings=warning_count,
        )
        
        return validation_result


def create_integrity_validator(strict_mode: bool = False) -> IntegrityValidator:
    """Validator covering every table id and every catalogued foreign key"""
    validator = IntegrityValidator(strict_mode=strict_mode)
    for table in TableName:
        validator.add_unique_id_check(table)
    for foreign_key in FOREIGN_KEYS:
        validator.add_foreign_key_check(foreign_key)
    return validator


def validate_snapshot(snapshot: Snapshot, strict_mode: bool = False) -> ValidationResult:
    return create_integrity_validator(strict_mode=strict_mode).validate(snapshot)
