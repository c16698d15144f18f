# Client: streaming consumer, display state and CLI
"""
Client side of the blog writer.

Reads the streamed response incrementally, keeps the display state as
immutable snapshots and exposes the user actions (generate, copy, reset).
"""

from .api_client import GenerateClient, LocalGenerateClient
from .session import WriterSession
from .state import DisplayState
from .stream import consume_stream

__all__ = [
    "DisplayState",
    "GenerateClient",
    "LocalGenerateClient",
    "WriterSession",
    "consume_stream",
]
