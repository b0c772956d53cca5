"""
HTTP client for the claims endpoints.

Used by the upload widget and table collaborators. Any failure to complete
a request surfaces as TransportFailure with one generic message; there are
no retries.
"""

import asyncio
from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import aiohttp

from claims_api.core.exceptions import TransportFailure
from claims_api.utils.logger import get_logger

logger = get_logger(__name__)

UPLOAD_FAILURE_MESSAGE = "Error on CSV Upload"
FETCH_FAILURE_MESSAGE = "Error on CSV Fetch"


class ClaimsClient:
    """Async client for POST /claims/upload and GET /claims."""

    def __init__(self, base_url: str = "http://localhost:8000", timeout: float = 30.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self) -> "ClaimsClient":
        await self._ensure_session()
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def _ensure_session(self):
        """Ensure aiohttp session is available"""
        if self.session is None or self.session.closed:
            self.session = aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=self.timeout))

    async def close(self):
        """Close aiohttp session"""
        if self.session:
            await self.session.close()
            self.session = None

    async def upload_claims(self, file: Union[str, Path, bytes], file_name: str = "claims.csv") -> Dict[str, Any]:
        """
        Upload a claims CSV

        Args:
            file: Path to the CSV or its raw content
            file_name: File name sent with raw content

        Returns:
            Upload summary as returned by the service

        Raises:
            TransportFailure: If the request does not complete with a 2xx status
        """
        if isinstance(file, (str, Path)):
            path = Path(file)
            content = path.read_bytes()
            file_name = path.name
        else:
            content = file

        form = aiohttp.FormData()
        form.add_field("file", content, filename=file_name, content_type="text/csv")
        return await self._request("POST", "/claims/upload", UPLOAD_FAILURE_MESSAGE, data=form)

    async def fetch_claims(self,
                           member_id: Optional[str] = None,
                           start_date: Optional[Union[str, date]] = None,
                           end_date: Optional[Union[str, date]] = None) -> List[Dict[str, Any]]:
        """
        Fetch committed claims, newest service date first

        Empty filters are not sent.

        Raises:
            TransportFailure: If the request does not complete with a 2xx status
        """
        params = {}
        if member_id:
            params["memberId"] = member_id
        if start_date:
            params["startDate"] = str(start_date)
        if end_date:
            params["endDate"] = str(end_date)

        return await self._request("GET", "/claims", FETCH_FAILURE_MESSAGE, params=params)

    async def _request(self, method: str, path: str, failure_message: str, **kwargs) -> Any:
        await self._ensure_session()
        url = f"{self.base_url}{path}"

        try:
            async with self.session.request(method, url, **kwargs) as response:
                if response.status >= 400:
                    logger.warning(f"{method} {path} returned {response.status}: {await response.text()}")
                    raise TransportFailure(failure_message, status_code=response.status)
                return await response.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            logger.warning(f"{method} {path} failed: {e}")
            raise TransportFailure(failure_message) from e
