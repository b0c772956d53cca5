# ==============================================
# claims_api/transformers/claim_validator.py
# ==============================================
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence

from claims_api.core.enums import ClaimField
from claims_api.domain.entities import (
    ClaimRecord,
    InvalidRow,
    RawRow,
    RowOutcome,
    ValidRow,
    split_diagnosis_codes,
)
from claims_api.utils.date_utils import parse_date
from claims_api.utils.logger import get_logger
from claims_api.utils.validation_utils import is_blank, parse_positive_integer

logger = get_logger(__name__)


class ValidationType(Enum):
    """Types of field validations"""
    REQUIRED = "required"
    DATE = "date"
    POSITIVE_INTEGER = "positive_integer"


@dataclass(frozen=True)
class ValidationRule:
    """One field check. A failing rule yields exactly one violation."""
    field_name: str
    validation_type: ValidationType
    error_message: str
    is_enabled: bool = True

    @property
    def violation(self) -> str:
        return f"{self.field_name}: {self.error_message}"


DEFAULT_RULES = [
    ValidationRule(ClaimField.CLAIM_ID.value, ValidationType.REQUIRED, "Required"),
    ValidationRule(ClaimField.MEMBER_ID.value, ValidationType.REQUIRED, "Required"),
    ValidationRule(ClaimField.SERVICE_DATE.value, ValidationType.DATE, "Invalid date"),
    ValidationRule(
        ClaimField.TOTAL_AMOUNT.value,
        ValidationType.POSITIVE_INTEGER,
        "Invalid totalAmount (not a positive integer)",
    ),
]


class ClaimRowValidator:
    """
    Field validation for uploaded claim rows.

    Every enabled rule is evaluated for every row; there is no
    short-circuit, so a row reports all of its violations at once.
    diagnosisCodes carries no rule and is accepted as written.
    """

    def __init__(self, rules: Optional[Sequence[ValidationRule]] = None):
        self.rules = list(rules if rules is not None else DEFAULT_RULES)
        self.logger = logger
        self._checks: Dict[ValidationType, Callable[[str], bool]] = {
            ValidationType.REQUIRED: lambda value: not is_blank(value),
            ValidationType.DATE: lambda value: parse_date(value) is not None,
            ValidationType.POSITIVE_INTEGER: lambda value: parse_positive_integer(value) is not None,
        }

    def collect_violations(self, row: RawRow) -> List[str]:
        """Apply every enabled rule and return the violations in rule order."""
        violations = []
        for rule in self.rules:
            if not rule.is_enabled:
                continue
            if not self._checks[rule.validation_type](row.get(rule.field_name)):
                violations.append(rule.violation)
        return violations

    def validate_row(self, row: RawRow) -> RowOutcome:
        """
        Classify one raw row

        Args:
            row: Decoded raw row

        Returns:
            ValidRow carrying the typed record, or InvalidRow with its violations
        """
        violations = self.collect_violations(row)
        if violations:
            return InvalidRow(row_number=row.row_number, raw=row, errors=violations)

        return ValidRow(row_number=row.row_number, raw=row, record=self._build_record(row))

    def validate_rows(self, rows: Sequence[RawRow]) -> List[RowOutcome]:
        outcomes = [self.validate_row(row) for row in rows]
        invalid = sum(1 for outcome in outcomes if not outcome.is_valid)
        self.logger.debug(f"Field validation: {len(outcomes) - invalid} valid, {invalid} invalid")
        return outcomes

    @staticmethod
    def _build_record(row: RawRow) -> ClaimRecord:
        return ClaimRecord(
            claim_id=row.get(ClaimField.CLAIM_ID.value),
            member_id=row.get(ClaimField.MEMBER_ID.value),
            service_date=parse_date(row.get(ClaimField.SERVICE_DATE.value)),
            total_amount=parse_positive_integer(row.get(ClaimField.TOTAL_AMOUNT.value)),
            diagnosis_codes=split_diagnosis_codes(row.get(ClaimField.DIAGNOSIS_CODES.value)),
        )
