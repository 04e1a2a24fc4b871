# msgboard/services/message_service.py
import logging
from datetime import datetime
from typing import List, Mapping, Optional, Tuple

from msgboard.models import Message

logger = logging.getLogger(__name__)

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_client_ip(headers: Mapping[str, str], client: Optional[Tuple[str, int]]) -> str:
    """Prefer X-Forwarded-For as sent, fall back to the peer as host:port."""
    forwarded = headers.get("x-forwarded-for")
    if forwarded:
        return forwarded
    if client is None:
        return ""
    host, port = client
    return f"{host}:{port}"


class MessageService:
    """Builds and records board messages. Nothing is stored."""

    def __init__(self, clock=datetime.now):
        self.clock = clock

    def build_message(self, user: str, msg: str, cate: str, ip: str) -> Message:
        return Message(
            user=user,
            msg=msg,
            cate=cate,
            time=self.clock().strftime(TIME_FORMAT),
            ip=ip,
        )

    def record_message(self, message: Message) -> Message:
        """Log the message; there is no backing store to write it to."""
        logger.info("新消息: %s", message.model_dump(by_alias=True))
        return message

    def list_messages(self, cate: str) -> List[Message]:
        """Messages for ``cate``. Always empty until a store exists."""
        return []


message_service = MessageService()
