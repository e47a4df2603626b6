# taskboard/schemas/error.py
from datetime import datetime
from typing import Dict, Optional

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    message: str
    error: str
    status: int
    path: str
    timestamp: datetime
    validation_errors: Optional[Dict[str, str]] = None
