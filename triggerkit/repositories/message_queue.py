"""Message queue wrapper for SQS operations."""

import uuid
from typing import Any, Optional

from pydantic import BaseModel

from triggerkit.config import settings
from triggerkit.exceptions import ConfigurationError
from triggerkit.logging.config import get_logger
from triggerkit.repositories.base import BaseRepository

logger = get_logger(__name__)

FIFO_SUFFIX = ".fifo"


def generate_message_id() -> str:
    """Random identifier for FIFO group and deduplication ids."""
    return uuid.uuid4().hex


class SendResult(BaseModel):
    """Outcome of one send."""

    message_id: str
    sequence_number: Optional[str] = None  # FIFO queues only


class MessageQueue(BaseRepository):
    """
    Repository for sending messages to one SQS queue.

    FIFO queues (URL ending in ``.fifo``) need a message group id and a
    deduplication id on every send. The group id is generated once and
    reused so that messages from one instance stay ordered; the
    deduplication id applies to the next send only and is generated when
    the caller did not set one.
    """

    service_name = "sqs"

    def __init__(self, queue_url: str | None = None, endpoint_url: str | None = None) -> None:
        """
        Initialize MessageQueue.

        Args:
            queue_url: Queue URL (defaults to the SQS_QUEUE_URL setting)
            endpoint_url: Endpoint override (defaults to the SQS_ENDPOINT_URL setting)

        Raises:
            ConfigurationError: If no queue URL is configured
        """
        super().__init__(endpoint_url or settings.sqs_endpoint_url)
        self.queue_url = queue_url or settings.sqs_queue_url
        if not self.queue_url:
            raise ConfigurationError("Message queue requires a queue URL")

        self.fifo = self.queue_url.endswith(FIFO_SUFFIX)
        self._message_group_id: str | None = None
        self._next_deduplication_id: str | None = None

    @property
    def message_group_id(self) -> str | None:
        return self._message_group_id

    def set_message_group_id(self, message_group_id: str) -> bool:
        """
        Set the group id used for subsequent sends.

        Returns:
            True if set, False on a standard queue (nothing is changed)
        """
        if not self.fifo:
            return False
        self._message_group_id = message_group_id
        return True

    def set_next_deduplication_id(self, deduplication_id: str) -> bool:
        """
        Set the deduplication id of the next send only.

        Returns:
            True if set, False on a standard queue (nothing is changed)
        """
        if not self.fifo:
            return False
        self._next_deduplication_id = deduplication_id
        return True

    def _ordering_params(
        self,
        group_id: str | None,
        deduplication_id: str | None,
    ) -> dict[str, str]:
        if not self.fifo:
            if group_id or deduplication_id:
                logger.warning(
                    "Ignoring group/deduplication id on a standard queue",
                    extra={"context": {"queue_url": self.queue_url}},
                )
            return {}

        # Pending dedup id is consumed even when a per-send id overrides it
        pending, self._next_deduplication_id = self._next_deduplication_id, None

        if group_id is None:
            if self._message_group_id is None:
                self._message_group_id = generate_message_id()
            group_id = self._message_group_id

        return {
            "MessageGroupId": group_id,
            "MessageDeduplicationId": deduplication_id or pending or generate_message_id(),
        }

    async def send_message(
        self,
        body: str,
        group_id: str | None = None,
        deduplication_id: str | None = None,
    ) -> SendResult:
        """
        Send a text message.

        Args:
            body: Message body
            group_id: Group id for this send only (FIFO)
            deduplication_id: Deduplication id for this send only (FIFO)

        Returns:
            SendResult with the message id and, for FIFO queues, the sequence number
        """
        params: dict[str, Any] = {"QueueUrl": self.queue_url, "MessageBody": body}
        params.update(self._ordering_params(group_id, deduplication_id))

        logger.debug(
            "Sending message",
            extra={
                "context": {
                    "queue_url": self.queue_url,
                    "message_group_id": params.get("MessageGroupId"),
                    "message_deduplication_id": params.get("MessageDeduplicationId"),
                }
            },
        )

        async with self.client() as sqs:
            response = await sqs.send_message(**params)

        result = SendResult(
            message_id=response["MessageId"],
            sequence_number=response.get("SequenceNumber"),
        )
        logger.info(
            "Message sent",
            extra={"context": {"queue_url": self.queue_url, "message_id": result.message_id}},
        )
        return result
