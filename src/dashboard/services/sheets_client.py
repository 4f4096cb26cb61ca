"""Google Sheets client with retries and error handling."""
import logging
from typing import Dict, List, Optional
from urllib.parse import quote

import requests
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type
)

from src.config.api_config import APIConfig

logger = logging.getLogger(__name__)


class SheetsError(Exception):
    """Base exception for Google Sheets API errors."""
    pass


class SheetsRetryableError(SheetsError):
    """Raised for rate limiting and server errors worth retrying."""
    pass


class SheetsAPIError(SheetsError):
    """Raised when the API rejects a request."""

    def __init__(self, status_code: int, details: str):
        super().__init__(f"Google Sheets API error {status_code}: {details}")
        self.status_code = status_code
        self.details = details


class SheetsClient:
    """Thin wrapper around the Sheets v4 ``values`` endpoint."""

    BASE_URL = "https://sheets.googleapis.com/v4/spreadsheets"
    TIMEOUT_SECONDS = 15

    def __init__(self, api_key: Optional[str] = None, sheet_id: Optional[str] = None,
                 session: Optional[requests.Session] = None):
        """Initialize the client.

        Args:
            api_key: Google Sheets API key. Loaded from config when omitted.
            sheet_id: Spreadsheet id. Loaded from config when omitted.
            session: Optional requests session (useful for connection reuse)
        """
        if not api_key or not sheet_id:
            config = APIConfig.from_env()
            api_key = api_key or config.google_sheets_api_key
            sheet_id = sheet_id or config.google_sheet_id
        self.api_key = api_key
        self.sheet_id = sheet_id
        self.session = session or requests.Session()
        self.headers = {'Accept': 'application/json'}

    def _url(self, range_a1: str) -> str:
        return f"{self.BASE_URL}/{self.sheet_id}/values/{quote(range_a1, safe='')}"

    @retry(
        retry=retry_if_exception_type((requests.RequestException, SheetsRetryableError)),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=4, max=10),
        reraise=True
    )
    def _make_request(self, range_a1: str) -> Dict:
        """Make a request for one A1 range with retries.

        Args:
            range_a1: Range such as ``IG Reels!A2:I``

        Returns:
            JSON response from API

        Raises:
            SheetsRetryableError: On 429 or 5xx after retries are exhausted
            SheetsAPIError: On any other non-200 status
            requests.RequestException: For network failures after retries
        """
        response = self.session.get(
            self._url(range_a1),
            headers=self.headers,
            params={'key': self.api_key},
            timeout=self.TIMEOUT_SECONDS
        )

        if response.status_code == 429 or response.status_code >= 500:
            logger.warning(f"Retryable Sheets response {response.status_code} for {range_a1}")
            raise SheetsRetryableError(f"Sheets returned {response.status_code} for {range_a1}")
        if response.status_code != 200:
            logger.error(f"Sheets API error {response.status_code} for {range_a1}: {response.text}")
            raise SheetsAPIError(response.status_code, response.text)

        return response.json()

    def get_values(self, range_a1: str) -> List[List[str]]:
        """Fetch the cell values for a range.

        Args:
            range_a1: Range such as ``Daily Revenue!A:C``

        Returns:
            Rows of display strings; empty when the range has no data

        Raises:
            SheetsError: When the request ultimately fails
        """
        try:
            data = self._make_request(range_a1)
        except requests.RequestException as e:
            raise SheetsError(f"Failed to fetch {range_a1}: {str(e)}") from e

        rows = data.get('values', [])
        logger.debug(f"Fetched {len(rows)} rows from {range_a1}")
        return rows
