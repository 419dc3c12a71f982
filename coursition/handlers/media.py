"""Media endpoint handlers."""

import logging

from coursition.errors import DomainError
from coursition.handlers.translation import to_wire_error
from coursition.media.models import MediaResponse, ParseMediaRequest
from coursition.tracing import span
from coursition.usecases.media import MediaUsecases

logger = logging.getLogger("coursition.handlers.media")


class MediaHandlers:
    def __init__(self, usecases: MediaUsecases):
        self._usecases = usecases

    async def parse_media(self, request: ParseMediaRequest) -> MediaResponse:
        with span(
            "parse_media_handler",
            language=request.language,
            source=request.source_kind,
        ):
            try:
                segments = await self._usecases.parse_media(request)
            except DomainError as e:
                wire = to_wire_error(e)
                logger.info("parse_media(%s) -> %s", request.source_kind, wire.tag())
                raise wire from e
            return MediaResponse(segments=segments)
