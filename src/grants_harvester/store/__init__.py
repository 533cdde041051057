"""Storage for the stage artifacts: identifier list, filtered details, statistics."""

from grants_harvester.store.base import ArtifactStore
from grants_harvester.store.json_store import JsonArtifactStore

__all__ = ["ArtifactStore", "JsonArtifactStore"]
