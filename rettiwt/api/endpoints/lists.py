"""List endpoint definition and adapter.

Upstream ignores ``count`` for the first page of a list (no cursor); it is
sent anyway so that later pages honour it.
"""

from __future__ import annotations

from ..constants import OP_LIST_LATEST_TWEETS
from ..core.enums import ResourceType
from .graphql import timeline_spec
from .timeline import RecentTweetTimelineAdapter

SPEC = timeline_spec(ResourceType.LIST_TWEETS, OP_LIST_LATEST_TWEETS, id_variable="listId")


class Adapter(RecentTweetTimelineAdapter):
    pass
