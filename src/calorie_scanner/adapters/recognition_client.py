"""HTTP client for a remote food recognition endpoint."""

from dataclasses import dataclass
from typing import Protocol

import httpx

_FILE_EXTENSIONS = {
    "image/jpeg": "jpg",
    "image/png": "png",
    "image/webp": "webp",
}


class RecognitionApi(Protocol):
    """Interface for remote food recognition calls."""

    async def recognize(self, content: bytes, content_type: str) -> dict[str, object]:
        """Upload an image and return the raw JSON envelope."""


@dataclass
class HttpxRecognitionApi(RecognitionApi):
    """HTTPX-backed recognition client posting multipart image uploads."""

    endpoint: str
    api_key: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 15

    @classmethod
    def create(
        cls, endpoint: str, api_key: str, timeout_seconds: float = 15
    ) -> "HttpxRecognitionApi":
        """Create a recognition client with a managed httpx session."""
        return cls(
            endpoint=endpoint,
            api_key=api_key,
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def recognize(self, content: bytes, content_type: str) -> dict[str, object]:
        """POST the image as the ``image`` form field."""
        extension = _FILE_EXTENSIONS.get(content_type, "jpg")
        response = await self.http_client.post(
            self.endpoint,
            headers={"X-API-Key": self.api_key},
            files={"image": (f"scan.{extension}", content, content_type)},
            timeout=self.timeout_seconds,
        )
        response.raise_for_status()
        payload = response.json()
        if not isinstance(payload, dict):
            raise ValueError("Recognition response is not a JSON object")
        return payload

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
