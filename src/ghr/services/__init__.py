"""Business logic services for ghr."""

from ghr.services.cloning import CloneService, Resolution
from ghr.services.sync import RepositoryRecord, SyncService

__all__ = [
    "CloneService",
    "Resolution",
    "RepositoryRecord",
    "SyncService",
]
