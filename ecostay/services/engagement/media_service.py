"""
Activity media attachments.

Files are uploaded to the photo or video bucket under
`activity_<id>/<epoch millis>.<ext>`; the returned public URL is then
recorded as an event_photos or event_videos row.
"""

import mimetypes
import time
from typing import Callable, Union

from ecostay.core.exceptions import MissingFieldError, UploadError
from ecostay.core.logging import get_logger
from ecostay.db.remote_store import RemoteStore, StoreError
from ecostay.repositories.engagement import PhotoRepository, VideoRepository
from ecostay.schemas.common import MediaKind
from ecostay.schemas.engagement import MediaCreate, Photo, Video

logger = get_logger(__name__)


def media_path(activity_id: str, filename: str, timestamp_ms: int) -> str:
    extension = filename.rsplit(".", 1)[-1]
    return f"activity_{activity_id}/{timestamp_ms}.{extension}"


class MediaService:
    def __init__(
        self,
        store: RemoteStore,
        photos: PhotoRepository,
        videos: VideoRepository,
        photo_bucket: str = "event-photos",
        video_bucket: str = "event-videos",
        clock: Callable[[], float] = time.time,
    ):
        self.store = store
        self.photos = photos
        self.videos = videos
        self.buckets = {MediaKind.PHOTO: photo_bucket, MediaKind.VIDEO: video_bucket}
        self._clock = clock

    async def attach(
        self,
        activity_id: str,
        user_id: str,
        filename: str,
        data: bytes,
        kind: Union[MediaKind, str] = MediaKind.PHOTO,
    ) -> Union[Photo, Video]:
        """
        Upload a file and record it against the activity.

        Raises:
            UploadError: the storage bucket rejected the file
            RemoteWriteError: the media row could not be inserted
        """
        if not filename or not data:
            raise MissingFieldError("Please choose a file to upload", ["file"])

        kind = MediaKind(kind)
        bucket = self.buckets[kind]
        path = media_path(activity_id, filename, int(self._clock() * 1000))
        content_type, _ = mimetypes.guess_type(filename)

        try:
            url = await self.store.upload(bucket, path, data, content_type)
        except StoreError as e:
            raise UploadError(bucket, path, cause=e) from e

        logger.info(f"Uploaded {kind.value} for activity {activity_id}", extra={"path": path})
        payload = MediaCreate(activity_id=activity_id, user_id=user_id, url=url)
        if kind == MediaKind.PHOTO:
            return await self.photos.create(payload)
        return await self.videos.create(payload)
