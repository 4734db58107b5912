"""Async wrappers for the AWS services handlers commonly call."""

from triggerkit.repositories.content_store import ContentStore, StoredItem
from triggerkit.repositories.message_queue import MessageQueue, SendResult

__all__ = [
    "ContentStore",
    "StoredItem",
    "MessageQueue",
    "SendResult",
]
