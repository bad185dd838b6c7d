import logging
from typing import Optional

import httpx

from ramo.core.errors import FieldFetchError
from ramo.sources.base import FieldRecord, FieldSource


class HttpFieldSource(FieldSource):
    def __init__(self, target: str, timeout: float = 45.0, transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
        super().__init__(target)
        self.timeout = timeout
        self.transport = transport

    @property
    def name(self) -> str:
        return "HTTP"

    @classmethod
    def detect(cls, target: str) -> bool:
        return target.startswith(("http://", "https://"))

    async def fetch(self, field_name: Optional[str]) -> FieldRecord:
        logging.info(f"Fetching {self.target} (field: {field_name or 'whole document'})")

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(self.target, headers={"Accept": "application/json"})
        except httpx.HTTPError as e:
            logging.error(f"Async Request Error: {e}")
            raise FieldFetchError(f"Failed to load field '{field_name}': {e}") from e

        if response.status_code != 200:
            logging.error(f"HTTP Error {response.status_code}: {response.text}")
            raise FieldFetchError(
                f"Failed to load field '{field_name}': {self._error_message(response)}"
            )

        return self.extract_field(response.text, field_name)

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        # Record APIs usually answer [{"message": ...}] or {"message": ...}
        try:
            body = response.json()
        except ValueError:
            return f"HTTP {response.status_code}"

        if isinstance(body, list) and body and isinstance(body[0], dict):
            body = body[0]
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
        return f"HTTP {response.status_code}"
