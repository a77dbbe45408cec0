"""
Media Pydantic Schemas
"""

from typing import Optional
from pydantic import BaseModel

class PosterUpload(BaseModel):
    """Stored poster as returned to the client"""
    url: str
    filename: str
    file_size: int
    content_type: Optional[str] = None
