"""
Event Stream Session Store

Each open GET /events stream is a session with its own outbound queue.
Messages posted to POST /messages?session_id=... are answered by putting the
JSON-RPC response on that queue; the stream generator drains it.

The store is only touched from the event loop, so plain dict operations are
sufficient.
"""

import asyncio
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from growpanel_mcp.core.exceptions import SessionNotFoundError
from growpanel_mcp.observability.logging import get_logger

logger = get_logger(__name__)


@dataclass
class StreamSession:
    """
    One open event stream.

    Attributes:
        session_id: Opaque identifier handed to the client in the endpoint event.
        queue: Outbound JSON-RPC messages awaiting delivery.
        created_at: When the stream was opened.
    """

    session_id: str
    queue: "asyncio.Queue[dict[str, Any]]" = field(default_factory=asyncio.Queue)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    async def send(self, message: dict[str, Any]) -> None:
        """Queue a message for delivery on the stream."""
        await self.queue.put(message)


class StreamSessionStore:
    """
    In-process table of open event streams.

    Example:
        >>> store = StreamSessionStore()
        >>> session = store.create()
        >>> store.get(session.session_id) is session
        True
    """

    def __init__(self) -> None:
        self._sessions: dict[str, StreamSession] = {}

    def create(self) -> StreamSession:
        """Open a new session with a fresh random id."""
        session = StreamSession(session_id=uuid.uuid4().hex)
        self._sessions[session.session_id] = session
        logger.info("stream opened", session_id=session.session_id, open_streams=len(self._sessions))
        return session

    def get(self, session_id: str) -> StreamSession:
        """
        Look up an open session.

        Raises:
            SessionNotFoundError: If no stream with that id is open.
        """
        try:
            return self._sessions[session_id]
        except KeyError:
            raise SessionNotFoundError(session_id) from None

    def remove(self, session_id: str) -> None:
        """Forget a session. Removing an unknown id is a no-op."""
        if self._sessions.pop(session_id, None) is not None:
            logger.info("stream closed", session_id=session_id, open_streams=len(self._sessions))

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)
