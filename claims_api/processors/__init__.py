"""
Upload decoders.

Each processor turns the content of one uploaded file into numbered raw
rows ready for validation.
"""

from .base_processor import BaseProcessor
from .csv_processor import CSVProcessor

PROCESSOR_REGISTRY = {
    'csv': CSVProcessor,
    'text/csv': CSVProcessor,
    'application/csv': CSVProcessor,
}


def get_processor(file_type: str = 'csv', **kwargs) -> BaseProcessor:
    """
    Get processor instance for a file type

    Args:
        file_type: Type of file (csv)
        **kwargs: Processor configuration

    Returns:
        Processor instance

    Raises:
        ValueError: If file type is not supported
    """
    processor_class = PROCESSOR_REGISTRY.get(file_type.lower())
    if not processor_class:
        raise ValueError(f"Unsupported file type: {file_type}")
    return processor_class(**kwargs)


__all__ = [
    'BaseProcessor',
    'CSVProcessor',
    'PROCESSOR_REGISTRY',
    'get_processor',
]
