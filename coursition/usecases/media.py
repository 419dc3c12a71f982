"""Media parsing use case."""

from typing import List

from coursition.media.errors import (
    MediaEmptyError,
    MediaNotFoundError,
    MediaParsingError,
)
from coursition.media.models import FileMediaRequest, ParseMediaRequest, SubtitleSegment
from coursition.stores.media_store import MediaStore
from coursition.usecases.policy import run_usecase


class MediaUsecases:
    def __init__(self, store: MediaStore):
        self._store = store

    async def parse_media(self, request: ParseMediaRequest) -> List[SubtitleSegment]:
        """Parse media into subtitles ordered by start time.

        An uploaded file with no bytes is rejected before reaching the
        parsing engine.
        """

        async def work() -> List[SubtitleSegment]:
            if isinstance(request, FileMediaRequest) and not request.content:
                raise MediaEmptyError("uploaded file has no content")
            segments = await self._store.parse(request)
            return sorted(segments, key=lambda s: s.start)

        return await run_usecase(
            "parse_media_usecase",
            work,
            propagate=(MediaEmptyError, MediaParsingError, MediaNotFoundError),
            language=request.language,
            source=request.source_kind,
        )
