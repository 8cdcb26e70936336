"""
Media Repositories - photo and video attachments of activities.
"""

from ecostay.repositories.base import ActivityChildRepository
from ecostay.schemas.engagement import MediaCreate, Photo, Video


class PhotoRepository(ActivityChildRepository[Photo]):
    table = "event_photos"
    schema = Photo

    async def create(self, payload: MediaCreate) -> Photo:
        return await self._insert(payload)


class VideoRepository(ActivityChildRepository[Video]):
    table = "event_videos"
    schema = Video

    async def create(self, payload: MediaCreate) -> Video:
        return await self._insert(payload)
