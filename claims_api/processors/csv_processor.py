# ==============================================
# claims_api/processors/csv_processor.py
# ==============================================
import csv
import io
from typing import Dict, List

import pandas as pd

from .base_processor import BaseProcessor
from claims_api.core.constants import CLAIM_COLUMNS, FIRST_DATA_ROW
from claims_api.core.exceptions import FileDecodeError
from claims_api.domain.entities import RawRow
from claims_api.utils.logger import get_logger

logger = get_logger(__name__)


class CSVProcessor(BaseProcessor):
    """
    CSV decoder for claims uploads.

    The first line is the header. Every cell is read as a string, empty
    cells stay empty strings, and blank lines are skipped without consuming
    a row number.
    """

    def __init__(self, encoding: str = "utf-8-sig", **kwargs):
        """
        Initialize CSV processor

        Args:
            encoding: Text encoding for byte content
            **kwargs: Additional configuration options
        """
        super().__init__(encoding)

        self.delimiter = kwargs.get('delimiter', ',')
        self.quote_char = kwargs.get('quote_char', '"')
        self.expected_columns = kwargs.get('expected_columns', CLAIM_COLUMNS)

    def read_rows(self, text: str) -> List[RawRow]:
        """
        Parse CSV text into numbered raw rows

        Args:
            text: Full CSV content

        Returns:
            Raw rows in file order

        Raises:
            FileDecodeError: If the content cannot be tokenized
        """
        if not text.strip():
            self.logger.info("Upload is empty, no rows decoded")
            return []

        try:
            df = pd.read_csv(
                io.StringIO(self._drop_blank_lines(text)),
                sep=self.delimiter,
                quotechar=self.quote_char,
                dtype=str,
                keep_default_na=False,
                skip_blank_lines=True,
                index_col=False,
            )
        except pd.errors.EmptyDataError:
            return []
        except (pd.errors.ParserError, csv.Error, ValueError) as e:
            self.logger.warning(f"Error parsing CSV upload: {str(e)}")
            raise FileDecodeError(
                f"Failed to parse CSV file: {str(e)}",
                details={"delimiter": self.delimiter}
            ) from e

        df.columns = [str(column).strip() for column in df.columns]
        self._log_header_mismatch(list(df.columns))

        rows: List[RawRow] = []
        for record in df.fillna("").to_dict('records'):
            # A line with delimiters is a data row even when every cell is empty
            rows.append(RawRow(row_number=len(rows) + FIRST_DATA_ROW, data=self._clean_record(record)))

        self.logger.info(f"Decoded {len(rows)} data rows from CSV upload")
        return rows

    @staticmethod
    def _drop_blank_lines(text: str) -> str:
        """Remove empty and whitespace-only lines; they never hold a row."""
        return "\n".join(line for line in text.splitlines() if line.strip())

    def _clean_record(self, record: Dict[str, object]) -> Dict[str, str]:
        return {key: self._clean_value(value) for key, value in record.items()}

    def _log_header_mismatch(self, columns: List[str]) -> List[str]:
        """Log header columns that are missing; their cells decode as empty."""
        missing = [column for column in self.expected_columns if column not in columns]
        if missing:
            self.logger.warning(f"CSV header is missing columns: {', '.join(missing)}")
        return missing
