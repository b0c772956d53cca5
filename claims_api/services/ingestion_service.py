"""
Claims upload pipeline: decode, validate, detect duplicates, commit.
"""

from typing import List, Optional, Sequence, Tuple, Union

from claims_api.core.constants import DECODE_ERROR_ROW
from claims_api.core.exceptions import FileDecodeError
from claims_api.core.logging import audit_log, log_execution_time
from claims_api.domain.entities import (
    ClaimRecord,
    InvalidRow,
    RowError,
    RowOutcome,
    UploadResult,
    ValidRow,
)
from claims_api.processors import BaseProcessor, CSVProcessor
from claims_api.services.claims_store import ClaimsStore
from claims_api.transformers import ClaimRowValidator, DuplicateClaimDetector
from claims_api.utils.logger import get_logger

logger = get_logger(__name__)


class ClaimsIngestionService:
    """
    Runs one upload through the pipeline and commits it all-or-nothing.

    Row problems are data: they end up in the UploadResult and never raise.
    A file that cannot be decoded aborts the upload and is reported as a
    single row-0 error.
    """

    def __init__(
        self,
        store: ClaimsStore,
        processor: Optional[BaseProcessor] = None,
        validator: Optional[ClaimRowValidator] = None,
        duplicate_detector: Optional[DuplicateClaimDetector] = None,
    ):
        self.store = store
        self.processor = processor or CSVProcessor()
        self.validator = validator or ClaimRowValidator()
        self.duplicate_detector = duplicate_detector or DuplicateClaimDetector()
        self.logger = logger

    @log_execution_time(logger)
    def ingest(self, content: Union[bytes, str], file_name: Optional[str] = None) -> UploadResult:
        """
        Process an uploaded claims file

        Args:
            content: Full file content
            file_name: Original file name, for logging

        Returns:
            UploadResult describing the partition and whether it was committed
        """
        try:
            rows = self.processor.process(content)
        except FileDecodeError as e:
            self.logger.warning(f"Upload {file_name or '<unnamed>'} aborted: {e.message}")
            return self.decode_failure(e)

        outcomes = self.duplicate_detector.detect(self.validator.validate_rows(rows))
        valid_records, invalid_rows = self.partition(outcomes)

        self.logger.info(
            f"Upload {file_name or '<unnamed>'}: {len(rows)} rows, "
            f"{len(valid_records)} valid, {len(invalid_rows)} invalid"
        )
        return self.commit(valid_records, invalid_rows)

    @staticmethod
    def partition(outcomes: Sequence[RowOutcome]) -> Tuple[List[ClaimRecord], List[InvalidRow]]:
        """Split outcomes into valid records and invalid rows, keeping row order."""
        valid_records = [outcome.record for outcome in outcomes if isinstance(outcome, ValidRow)]
        invalid_rows = [outcome for outcome in outcomes if isinstance(outcome, InvalidRow)]
        return valid_records, invalid_rows

    def commit(self, valid_records: List[ClaimRecord], invalid_rows: List[InvalidRow]) -> UploadResult:
        """
        Append the batch only if no row is invalid

        Args:
            valid_records: Records that passed every check
            invalid_rows: Rows with at least one violation

        Returns:
            UploadResult; counts reflect the partition whether or not it committed
        """
        committed = not invalid_rows
        if committed:
            self.store.append_batch(valid_records)

        audit_log(
            action="COMMIT" if committed else "REJECT",
            resource="CLAIMS",
            details={"valid": len(valid_records), "invalid": len(invalid_rows)},
            success=committed,
        )

        return self.assemble_result(valid_records, invalid_rows, committed)

    @staticmethod
    def assemble_result(valid_records: List[ClaimRecord],
                        invalid_rows: List[InvalidRow],
                        committed: bool) -> UploadResult:
        return UploadResult(
            valid_data=list(valid_records),
            invalid_data=list(invalid_rows),
            errors=[RowError(row=row.row_number, message=row.message) for row in invalid_rows],
            committed=committed,
        )

    @staticmethod
    def decode_failure(error: FileDecodeError) -> UploadResult:
        return UploadResult(
            errors=[RowError(row=DECODE_ERROR_ROW, message=error.message)],
            committed=False,
        )
