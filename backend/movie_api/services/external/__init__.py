"""
External Services - File storage
"""

from .storage_service import StorageService, StoredFile

__all__ = ["StorageService", "StoredFile"]
