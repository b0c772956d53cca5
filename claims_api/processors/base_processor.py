# ==============================================
# claims_api/processors/base_processor.py
# ==============================================
from abc import ABC, abstractmethod
from typing import List, Optional, Union

from claims_api.core.exceptions import FileDecodeError
from claims_api.domain.entities import RawRow
from claims_api.utils.logger import get_logger

logger = get_logger(__name__)


class BaseProcessor(ABC):
    """
    Abstract base class for upload decoders.
    Turns the raw content of one uploaded file into numbered raw rows.
    """

    def __init__(self, encoding: str = "utf-8-sig"):
        """
        Initialize base processor

        Args:
            encoding: Text encoding used when content arrives as bytes
        """
        self.encoding = encoding
        self.logger = logger

    def decode_text(self, content: Union[bytes, str]) -> str:
        """
        Decode raw upload bytes into text

        Args:
            content: Uploaded file content

        Returns:
            Decoded text

        Raises:
            FileDecodeError: If the bytes are not valid in the configured encoding
        """
        if isinstance(content, str):
            return content

        try:
            return content.decode(self.encoding)
        except (UnicodeDecodeError, LookupError) as e:
            self.logger.warning(f"Failed to decode upload as {self.encoding}: {str(e)}")
            raise FileDecodeError(
                f"File is not valid {self.encoding} text",
                details={"encoding": self.encoding, "reason": str(e)}
            ) from e

    def process(self, content: Union[bytes, str]) -> List[RawRow]:
        """
        Decode content and extract its rows

        Args:
            content: Uploaded file content, bytes or text

        Returns:
            Raw rows in file order
        """
        return self.read_rows(self.decode_text(content))

    @abstractmethod
    def read_rows(self, text: str) -> List[RawRow]:
        """
        Split decoded text into raw rows

        Args:
            text: Full file content

        Returns:
            Raw rows in file order, numbered from 2
        """
        pass

    @staticmethod
    def _clean_value(value: Optional[object]) -> str:
        if value is None:
            return ""
        return str(value).strip()
