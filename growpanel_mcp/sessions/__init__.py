"""Sessions Package - open event stream bookkeeping."""

from growpanel_mcp.sessions.store import StreamSession, StreamSessionStore

__all__ = ["StreamSession", "StreamSessionStore"]
