"""
Movie Catalog API - Error Taxonomy
"""

from typing import Iterable, List, Optional


class MovieCatalogError(Exception):
    """Base error carrying the HTTP status it maps to"""

    def __init__(self, message: str, status_code: int = 400):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(MovieCatalogError):
    def __init__(self, entity: str = "Record", entity_id: Optional[int] = None):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found", status_code=404)


class InvalidReferenceError(MovieCatalogError):
    """Requested person ids do not all resolve to existing people"""

    def __init__(self, missing_ids: Iterable[int] = ()):
        self.missing_ids: List[int] = sorted(missing_ids)
        super().__init__("Invalid Actors assigned", status_code=400)


class PersistenceError(MovieCatalogError):
    """The store rejected a commit; nothing from the operation was written"""

    def __init__(self, message: str = "Failed to save changes"):
        super().__init__(message, status_code=500)


class InvalidUploadError(MovieCatalogError):
    def __init__(self, message: str):
        super().__init__(message, status_code=400)
