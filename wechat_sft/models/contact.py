"""
File: models/contact.py
Created: 2026-10-12
Last Modified: 2026-10-12
"""

from pydantic import BaseModel, Field


class Contact(BaseModel):
    """Contact directory entry from MicroMsg.db."""

    user_name: str = Field(..., description="Raw WeChat identifier (wxid or chatroom id)")
    remark: str = Field("", description="Remark name set by the exporting user")
    nick_name: str = Field("", description="Nickname chosen by the contact")

    @property
    def display_name(self) -> str:
        return self.remark or self.nick_name or self.user_name
