"""Shared fixtures for the claims service tests."""

from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Sequence

import pytest
from fastapi.testclient import TestClient

from claims_api.core.config import Settings, UploadSettings
from claims_api.domain.entities import ClaimRecord
from claims_api.main import create_application
from claims_api.services import ClaimsStore

HEADER = "claimId,memberId,serviceDate,totalAmount,diagnosisCodes"


def build_csv(rows: Iterable[Sequence[str]], header: str = HEADER) -> str:
    """Render rows as CSV text under the standard header."""
    lines = [header]
    for row in rows:
        lines.append(",".join(_quote(value) for value in row))
    return "\n".join(lines) + "\n"


def _quote(value: str) -> str:
    if "," in value or '"' in value:
        return '"' + value.replace('"', '""') + '"'
    return value


def make_record(claim_id: str,
                member_id: str = "M1",
                service_date: date = date(2024, 1, 1),
                total_amount: int = 1000,
                diagnosis_codes: Sequence[str] = ()) -> ClaimRecord:
    return ClaimRecord(
        claim_id=claim_id,
        member_id=member_id,
        service_date=service_date,
        total_amount=total_amount,
        diagnosis_codes=tuple(diagnosis_codes),
    )


@pytest.fixture
def store() -> ClaimsStore:
    return ClaimsStore()


@pytest.fixture
def settings() -> Settings:
    return Settings(ENVIRONMENT="test")


@pytest.fixture
def client(settings: Settings, store: ClaimsStore) -> TestClient:
    return TestClient(create_application(settings=settings, store=store))


@pytest.fixture
def small_upload_client(store: ClaimsStore) -> TestClient:
    settings = Settings(ENVIRONMENT="test", upload=UploadSettings(max_file_size=64))
    return TestClient(create_application(settings=settings, store=store))


def upload(client: TestClient, content: str | bytes, content_type: Optional[str] = "text/csv"):
    if isinstance(content, str):
        content = content.encode("utf-8")
    file_tuple = ("claims.csv", content, content_type) if content_type else ("claims.csv", content)
    return client.post("/claims/upload", files={"file": file_tuple})
