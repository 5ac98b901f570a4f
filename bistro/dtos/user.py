from typing import Optional

from .base import DocumentRequest


class UserUpsertRequest(DocumentRequest):
    """Profile fields recorded the first time a user logs in."""

    name: Optional[str] = None
    photo: Optional[str] = None
