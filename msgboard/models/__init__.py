from .message import Message, MessageList

__all__ = ["Message", "MessageList"]
