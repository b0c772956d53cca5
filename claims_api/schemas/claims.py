from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from claims_api.domain.entities import ClaimRecord, InvalidRow, RowError, UploadResult
from claims_api.services.query_service import ClaimsSummary
from claims_api.utils.date_utils import format_date


class WireModel(BaseModel):
    """Base for wire schemas: camelCase on the wire, snake_case in Python."""
    model_config = ConfigDict(populate_by_name=True)

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class ClaimRecordSchema(WireModel):
    """Schema for a committed claim."""
    claim_id: str = Field(..., alias="claimId")
    member_id: str = Field(..., alias="memberId")
    service_date: str = Field(..., alias="serviceDate", description="ISO date, YYYY-MM-DD")
    total_amount: str = Field(..., alias="totalAmount", description="Integer minor units, string encoded")
    diagnosis_codes: Optional[str] = Field(default=None, alias="diagnosisCodes", description="Codes joined by ', '")

    @classmethod
    def from_entity(cls, record: ClaimRecord) -> "ClaimRecordSchema":
        return cls(
            claim_id=record.claim_id,
            member_id=record.member_id,
            service_date=format_date(record.service_date),
            total_amount=str(record.total_amount),
            diagnosis_codes=record.diagnosis_codes_text or None,
        )


class InvalidRowSchema(WireModel):
    """Schema for a rejected upload row."""
    row_data: Dict[str, str] = Field(..., alias="rowData")
    row: int
    errors: List[str]

    @classmethod
    def from_entity(cls, row: InvalidRow) -> "InvalidRowSchema":
        return cls(row_data=dict(row.raw.data), row=row.row_number, errors=list(row.errors))


class RowErrorSchema(WireModel):
    row: int
    message: str

    @classmethod
    def from_entity(cls, error: RowError) -> "RowErrorSchema":
        return cls(row=error.row, message=error.message)


class UploadResultResponse(WireModel):
    """Schema for the claims upload response."""
    success_count: int = Field(..., alias="successCount")
    error_count: int = Field(..., alias="errorCount")
    valid_data: List[ClaimRecordSchema] = Field(default_factory=list, alias="validData")
    invalid_data: List[InvalidRowSchema] = Field(default_factory=list, alias="invalidData")
    errors: List[RowErrorSchema] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, result: UploadResult) -> "UploadResultResponse":
        return cls(
            success_count=result.success_count,
            error_count=result.error_count,
            valid_data=[ClaimRecordSchema.from_entity(record) for record in result.valid_data],
            invalid_data=[InvalidRowSchema.from_entity(row) for row in result.invalid_data],
            errors=[RowErrorSchema.from_entity(error) for error in result.errors],
        )


class ClaimsSummaryResponse(WireModel):
    """Schema for the claims summary: count and total amount in minor units."""
    count: int
    total_amount: str = Field(..., alias="totalAmount")

    @classmethod
    def from_entity(cls, summary: ClaimsSummary) -> "ClaimsSummaryResponse":
        return cls(count=summary.count, total_amount=str(summary.total_amount))
