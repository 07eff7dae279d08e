from typing import Optional

from pydantic import BaseModel


class GenerateRequest(BaseModel):
    category: Optional[str] = None
    brand: Optional[str] = None
    count: Optional[int] = None  # clamped to MAX_IMAGES by the service
