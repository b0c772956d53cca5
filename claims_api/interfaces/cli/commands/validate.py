"""
Dry-run validation of a claims CSV.
"""

import argparse
import json
from pathlib import Path

from claims_api.schemas.claims import UploadResultResponse
from claims_api.services import ClaimsIngestionService, ClaimsStore

from .base import BaseCommand


class Command(BaseCommand):
    name = "validate"
    description = "Validate a claims CSV without committing it anywhere"

    def add_arguments(self, parser: argparse.ArgumentParser):
        parser.add_argument("file", help="Path to the claims CSV")
        parser.add_argument("--summary", action="store_true", help="Print only counts and row errors")

    def handle(self, file: str, summary: bool = False, **kwargs) -> int:
        path = Path(file)
        if not path.is_file():
            self.print_error(f"File not found: {path}")
            return 2

        # Throwaway store: validation only
        result = ClaimsIngestionService(ClaimsStore()).ingest(path.read_bytes(), file_name=path.name)
        payload = UploadResultResponse.from_entity(result).to_wire()

        if summary:
            payload = {key: payload[key] for key in ("successCount", "errorCount", "errors")}

        print(json.dumps(payload, indent=2))

        if result.error_count:
            self.print_error(f"{result.error_count} row(s) failed validation, nothing would be committed")
            return 1

        self.print_success(f"All {result.success_count} row(s) are valid")
        return 0
