"""Runtime components: REST dispatch and tweet streaming."""

from .stream import StreamState, TweetStream

__all__ = [
    "StreamState",
    "TweetStream",
]
