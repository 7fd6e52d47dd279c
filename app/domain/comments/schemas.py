"""Comment domain schemas - Pydantic models for validation"""

from pydantic import BaseModel


class CommentUpdate(BaseModel):
    comment: str


class CommentResponse(BaseModel):
    status: str = "OK"
    comment: str
