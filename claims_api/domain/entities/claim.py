from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional, Tuple, Union

from claims_api.core.constants import DIAGNOSIS_CODE_SEPARATOR


def split_diagnosis_codes(value: Optional[str]) -> Tuple[str, ...]:
    """Split a wire-form code list ("A10, B20") into its codes."""
    if not value:
        return ()
    return tuple(code.strip() for code in value.split(",") if code.strip())


@dataclass(frozen=True)
class ClaimRecord:
    """
    A committed claim.

    Amounts are integer minor units (cents). Diagnosis codes keep their
    upload order.
    """
    claim_id: str
    member_id: str
    service_date: date
    total_amount: int
    diagnosis_codes: Tuple[str, ...] = ()

    @property
    def diagnosis_codes_text(self) -> str:
        return DIAGNOSIS_CODE_SEPARATOR.join(self.diagnosis_codes)


@dataclass(frozen=True)
class RawRow:
    """A decoded data row. Row 1 is the header, so data starts at 2."""
    row_number: int
    data: Dict[str, str]

    def get(self, column: str) -> str:
        return self.data.get(column) or ""


@dataclass(frozen=True)
class ValidRow:
    row_number: int
    raw: RawRow
    record: ClaimRecord

    is_valid = True


@dataclass(frozen=True)
class InvalidRow:
    row_number: int
    raw: RawRow
    errors: List[str] = field(default_factory=list)

    is_valid = False

    @property
    def message(self) -> str:
        return ", ".join(self.errors)


RowOutcome = Union[ValidRow, InvalidRow]


@dataclass(frozen=True)
class RowError:
    row: int
    message: str


@dataclass
class UploadResult:
    """Summary of one upload, reported whether or not the batch was committed."""
    valid_data: List[ClaimRecord] = field(default_factory=list)
    invalid_data: List[InvalidRow] = field(default_factory=list)
    errors: List[RowError] = field(default_factory=list)
    committed: bool = False

    @property
    def success_count(self) -> int:
        return len(self.valid_data)

    @property
    def error_count(self) -> int:
        # A decode failure has no invalid rows, only the synthetic row-0 error
        return len(self.invalid_data) or len(self.errors)
