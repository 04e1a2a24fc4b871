"""Pydantic models for board messages."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Message(BaseModel):
    """A single submitted message, as returned by the listing endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    user: str = Field(..., alias="User", description="Author name.")
    msg: str = Field(..., alias="Msg", description="Message text.")
    cate: str = Field(..., alias="Cate", description="Category the message belongs to.")
    time: str = Field(..., alias="Time", description="Submission time, YYYY-MM-DD HH:MM:SS.")
    ip: str = Field(..., alias="IP", description="Caller address.")


class MessageList(BaseModel):
    """Payload of ``GET /list``."""

    model_config = ConfigDict(populate_by_name=True)

    msgs: List[Message] = Field(default_factory=list, alias="Msgs")
