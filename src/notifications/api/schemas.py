"""Pydantic request schemas for the Notifications API."""

from pydantic import BaseModel


class InboxActionRequest(BaseModel):
    user_id: str
