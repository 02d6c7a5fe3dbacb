"""SheetDB API client for the booking spreadsheet."""

import logging

import httpx

from moviegem.config import settings
from moviegem.exceptions import BadServerResponseError

logger = logging.getLogger(__name__)


class SheetDBClient:
    """
    Client for a SheetDB endpoint that exposes a Google Sheet as REST.

    The client keeps no state between calls: every request opens its own
    httpx.AsyncClient, so one instance can be shared by concurrent callers.
    Failures are never retried.
    """

    def __init__(
        self,
        endpoint: str | None = None,
        sheet_name: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize SheetDB client.

        Args:
            endpoint: SheetDB API URL (uses settings if not provided)
            sheet_name: Sheet (tab) to read and write (uses settings if not provided)
            timeout: Request timeout in seconds (uses settings if not provided)
            transport: Optional httpx transport, mainly for tests
        """
        self.endpoint = (endpoint or settings.sheetdb_api_endpoint).rstrip("/")
        self.sheet_name = sheet_name if sheet_name is not None else settings.sheet_name
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=httpx.Timeout(self.timeout), transport=self.transport)

    def _sheet_params(self) -> dict[str, str]:
        return {"sheet": self.sheet_name} if self.sheet_name else {}

    async def search(self, filters: dict[str, str]) -> bytes:
        """
        Fetch rows whose columns equal the given values.

        Args:
            filters: Column header to value, e.g. {"場次日期": "2025/01/20"}

        Returns:
            Raw JSON body, a list of row objects once decoded

        Raises:
            BadServerResponseError: Any status other than 200
            httpx.TransportError: Connection failure or timeout
        """
        params = {**self._sheet_params(), **filters}
        return await self._get(f"{self.endpoint}/search", params)

    async def fetch_all(self) -> bytes:
        """Fetch every row of the sheet, returning the raw JSON body."""
        return await self._get(self.endpoint, self._sheet_params())

    async def append(self, rows: list[dict[str, str]]) -> int:
        """
        Append rows to the sheet.

        Args:
            rows: Row objects keyed by column header

        Returns:
            Number of rows SheetDB reports as created

        Raises:
            BadServerResponseError: Any status other than 201
            httpx.TransportError: Connection failure or timeout
        """
        async with self._client() as client:
            response = await client.post(
                self.endpoint,
                params=self._sheet_params(),
                json={"data": rows},
            )

        if response.status_code != 201:
            logger.error(f"SheetDB append failed with HTTP {response.status_code}")
            raise BadServerResponseError(response.status_code)

        created = len(rows)
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and "created" in body:
            try:
                created = int(body["created"])
            except (TypeError, ValueError):
                logger.warning(f"Ignoring unreadable created count {body['created']!r}")

        logger.info(f"Appended {created} row(s) to sheet '{self.sheet_name}'")
        return created

    async def _get(self, url: str, params: dict[str, str]) -> bytes:
        async with self._client() as client:
            response = await client.get(url, params=params)

        if response.status_code != 200:
            logger.error(f"SheetDB GET {url} failed with HTTP {response.status_code}")
            raise BadServerResponseError(response.status_code)

        logger.debug(f"SheetDB GET {url} params={params} -> {len(response.content)} bytes")
        return response.content
