from enum import Enum


class FieldType(str, Enum):
    """Semantic type of a claim column, used for comparison"""
    STRING = "STRING"
    INTEGER = "INTEGER"
    DATE = "DATE"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


class ClaimField(str, Enum):
    """Wire names of the claim columns, in header order"""
    CLAIM_ID = "claimId"
    MEMBER_ID = "memberId"
    SERVICE_DATE = "serviceDate"
    TOTAL_AMOUNT = "totalAmount"
    DIAGNOSIS_CODES = "diagnosisCodes"
