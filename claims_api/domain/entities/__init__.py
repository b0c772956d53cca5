from .claim import (
    ClaimRecord,
    InvalidRow,
    RawRow,
    RowError,
    RowOutcome,
    UploadResult,
    ValidRow,
    split_diagnosis_codes,
)

__all__ = [
    "ClaimRecord",
    "InvalidRow",
    "RawRow",
    "RowError",
    "RowOutcome",
    "UploadResult",
    "ValidRow",
    "split_diagnosis_codes",
]
