from typing import Any, Optional

from pydantic import BaseModel, model_serializer

from .catalog import SearchPage


class APIResponse(BaseModel):
    """Uniform envelope: {success, data|error|message}"""
    success: bool = True
    data: Optional[Any] = None
    error: Optional[str] = None
    message: Optional[str] = None

    @model_serializer(mode="wrap")
    def _omit_empty(self, handler):
        return {k: v for k, v in handler(self).items() if v is not None}


class SearchResponse(SearchPage):
    """Search and trending pages are served flat, next to the success flag"""
    success: bool = True


class HealthResponse(BaseModel):
    status: str
    message: str
    database: str
