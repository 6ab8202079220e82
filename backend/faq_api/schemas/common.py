"""Shared response schemas."""
from typing import Literal

from pydantic import BaseModel


class AckResponse(BaseModel):
    """Body returned by successful deletes."""
    data: Literal[True] = True


class ErrorResponse(BaseModel):
    error: str
