"""Media access layer: turns a parse request into subtitle segments."""

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError

from coursition.media.errors import MediaNotFoundError, MediaParsingError
from coursition.media.models import (
    FileMediaRequest,
    MediaResponse,
    ParseMediaRequest,
    SubtitleSegment,
)
from coursition.tracing import span

logger = logging.getLogger("coursition.stores.media")


class MediaStore(ABC):
    """Abstract interface for the parsing engine (mock or remote)."""

    engine_url: str = ""

    @abstractmethod
    async def parse(self, request: ParseMediaRequest) -> List[SubtitleSegment]:
        """Parse media into subtitle segments. Raises MediaParsingError."""
        ...


# Mock output - replace with a real engine via MEDIA_BACKEND=http
DEFAULT_SEGMENTS = [
    {"start": 0, "end": 5000, "text": "Hello world"},
    {"start": 5000, "end": 10000, "text": "This is a test"},
    {"start": 10000, "end": 15000, "text": "Subtitle parsing complete"},
]


class MockMediaStore(MediaStore):
    """Returns fixed subtitles for any input, after an optional delay."""

    def __init__(
        self,
        segments: Optional[List[Dict[str, Any]]] = None,
        delay_seconds: Optional[float] = None,
        engine_url: str = "mock",
    ):
        self._segments = DEFAULT_SEGMENTS if segments is None else segments
        self._delay = delay_seconds
        self.engine_url = engine_url

    async def parse(self, request: ParseMediaRequest) -> List[SubtitleSegment]:
        with span(
            "MediaStore.parse",
            parsing_engine_url=self.engine_url,
            language=request.language,
        ):
            if self._delay:
                await asyncio.sleep(self._delay)
            try:
                return [SubtitleSegment.model_validate(s) for s in self._segments]
            except ValidationError as e:
                raise MediaParsingError(request.source, e) from e


class HttpMediaStore(MediaStore):
    """Delegates parsing to a remote engine over HTTP.

    POST {engine_url}/parse with either ``{url, language}`` as JSON or a
    multipart ``file`` plus ``language``. The engine answers
    ``{"json": [segments]}``.
    """

    def __init__(
        self,
        engine_url: str,
        timeout: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.engine_url = engine_url.rstrip("/")
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def aclose(self) -> None:
        await self._client.aclose()

    def _request_kwargs(self, request: ParseMediaRequest) -> Dict[str, Any]:
        if isinstance(request, FileMediaRequest):
            return {
                "files": {"file": (request.filename or "upload", request.content)},
                "data": {"language": request.language},
            }
        return {"json": {"url": request.url, "language": request.language}}

    async def parse(self, request: ParseMediaRequest) -> List[SubtitleSegment]:
        with span(
            "MediaStore.parse",
            parsing_engine_url=self.engine_url,
            language=request.language,
            source=request.source_kind,
        ):
            try:
                response = await self._client.post(
                    f"{self.engine_url}/parse", **self._request_kwargs(request)
                )
                if response.status_code == 404:
                    raise MediaNotFoundError(request.source)
                response.raise_for_status()
                parsed = MediaResponse.model_validate(response.json())
            except httpx.HTTPError as e:
                logger.warning("Parsing engine request failed: %s", e)
                raise MediaParsingError(request.source, e) from e
            except ValueError as e:
                # invalid JSON or a payload that is not a segment list
                logger.warning("Parsing engine returned an unusable payload: %s", e)
                raise MediaParsingError(request.source, e) from e

            logger.info(
                "Parsed %s into %d segments (language=%s)",
                request.source, len(parsed.segments), request.language,
            )
            return parsed.segments
