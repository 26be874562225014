from __future__ import annotations

from .routes import ROUTE_BY_FLAG, ROUTE_GROUPS, all_routes, route_by_flag
from .topics import TOPIC_BY_FLAG, TOPIC_FLAG_FIRST, TOPIC_FLAG_LAST, TOPICS, topic_by_flag, topics_for_episode
from .types import (
    LABEL_PREFIX,
    UNKNOWN_LABEL,
    Character,
    Ending,
    Objective,
    Route,
    SideCharacter,
    Topic,
    TopicType,
    character_label,
    character_labels,
    ending_label,
    ending_labels,
    side_character_label,
    side_character_labels,
)

# A slot only counts as a finished playthrough when all of these are set.
COMPLETION_FLAGS: tuple[int, ...] = (4379, 4380, 4381, 4382, 4628)

__all__ = [
    "COMPLETION_FLAGS",
    "LABEL_PREFIX",
    "ROUTE_BY_FLAG",
    "ROUTE_GROUPS",
    "TOPICS",
    "TOPIC_BY_FLAG",
    "TOPIC_FLAG_FIRST",
    "TOPIC_FLAG_LAST",
    "UNKNOWN_LABEL",
    "Character",
    "Ending",
    "Objective",
    "Route",
    "SideCharacter",
    "Topic",
    "TopicType",
    "all_routes",
    "character_label",
    "character_labels",
    "ending_label",
    "ending_labels",
    "route_by_flag",
    "side_character_label",
    "side_character_labels",
    "topic_by_flag",
    "topics_for_episode",
]
