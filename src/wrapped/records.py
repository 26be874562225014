from __future__ import annotations

import msgspec

from .reference import (
    Route,
    Topic,
    character_label,
    side_character_label,
)


class RouteRef(msgspec.Struct, rename="camel", forbid_unknown_fields=True):
    flag: int
    name: str
    characters: list[str] = msgspec.field(default_factory=list)
    objective: str = ""
    side_characters: list[str] = msgspec.field(default_factory=list)

    @classmethod
    def from_route(cls, route: Route) -> RouteRef:
        return cls(
            flag=int(route.flag),
            name=route.name,
            characters=[character_label(character) for character in route.characters],
            objective=route.objective.name,
            side_characters=[side_character_label(side) for side in route.side_characters],
        )


class TopicRef(msgspec.Struct, rename="camel", forbid_unknown_fields=True):
    flag: int
    name: str
    episode: int = 0
    type: str = ""

    @classmethod
    def from_topic(cls, topic: Topic) -> TopicRef:
        return cls(
            flag=int(topic.flag),
            name=topic.name,
            episode=int(topic.episode),
            type=topic.topic_type.name.title(),
        )


class DecodedRecord(msgspec.Struct, rename="camel", forbid_unknown_fields=True):
    """Facts extracted from one uploaded save.

    Defaults describe an invalid upload: only `sha256_hash` is meaningful then.
    Friendship levels are only trustworthy when `has_friendship` is set.
    """

    sha256_hash: str
    is_valid: bool = False
    has_friendship: bool = False

    haruhi_friendship_level: int = 0
    mikuru_friendship_level: int = 0
    nagato_friendship_level: int = 0
    koizumi_friendship_level: int = 0
    tsuruya_friendship_level: int = 0

    unlocked_ending: str = ""

    num_topics_obtained: int = 0
    topics_obtained: list[TopicRef] = msgspec.field(default_factory=list)

    routes_taken: list[RouteRef] = msgspec.field(default_factory=list)
    routes_with_character: dict[str, int] = msgspec.field(default_factory=dict)
    routes_with_side_character: dict[str, int] = msgspec.field(default_factory=dict)

    haruhi_meter: int = 0

    # Episode 1
    saw_game_over_tutorial: bool = False
    ep1_activity_guess: str = ""
    num_comp_soc_members_interviewed: int = 0
    ep1_did_what_with_memory_card: str = ""
    ep1_resolution: str = ""

    # Episodes 2-5 are never read from the save; they stay at their defaults.
    ep2_found_the_secret_note: bool = False
    ep2_resolution: str = ""
    ep3_who_walked_you_home: str = ""
    ep3_resolution: str = ""
    ep4_a_resolution: str = ""
    ep4_b_resolution: str = ""
    ep5_cleared_chess_puzzle: bool = False
    ep5_defeated_haruhi_in_chess: bool = False
    ep5_who_woke_you_up: bool = False

    @property
    def friendship_levels(self) -> tuple[int, int, int, int, int]:
        return (
            self.haruhi_friendship_level,
            self.mikuru_friendship_level,
            self.nagato_friendship_level,
            self.koizumi_friendship_level,
            self.tsuruya_friendship_level,
        )


class RouteAggregate(msgspec.Struct, rename="camel", forbid_unknown_fields=True):
    route: RouteRef
    count: int = 0


class TopicAggregate(msgspec.Struct, rename="camel", forbid_unknown_fields=True):
    topic: TopicRef
    count: int = 0


class WrappedStats(msgspec.Struct, rename="camel", forbid_unknown_fields=True):
    """Corpus-wide snapshot served to the site."""

    num_submissions: int = 0
    num_friendship_submissions: int = 0

    haruhi_friendship_level: float = 0.0
    mikuru_friendship_level: float = 0.0
    nagato_friendship_level: float = 0.0
    koizumi_friendship_level: float = 0.0
    tsuruya_friendship_level: float = 0.0

    ending_chart: dict[str, int] = msgspec.field(default_factory=dict)

    average_topics_obtained: float = 0.0
    topics_obtained_chart: dict[str, int] = msgspec.field(default_factory=dict)
    topics_collected: list[TopicAggregate] = msgspec.field(default_factory=list)

    routes_taken: list[list[RouteAggregate]] = msgspec.field(default_factory=list)
    routes_count_max: int = 0
    average_routes_with_character: dict[str, float] = msgspec.field(default_factory=dict)
    average_routes_with_side_character: dict[str, float] = msgspec.field(default_factory=dict)

    average_haruhi_meter: float = 0.0

    # Episode 1
    saw_game_over_tutorial_chart: dict[str, int] = msgspec.field(default_factory=dict)
    ep1_activity_guess_chart: dict[str, int] = msgspec.field(default_factory=dict)
    num_comp_soc_members_interviewed_chart: dict[str, int] = msgspec.field(default_factory=dict)
    ep1_memory_card_chart: dict[str, int] = msgspec.field(default_factory=dict)
    ep1_resolution_chart: dict[str, int] = msgspec.field(default_factory=dict)

    save_data: DecodedRecord | None = None


def encode_json(value: DecodedRecord | WrappedStats) -> bytes:
    return msgspec.json.encode(value)


def decode_record_json(raw: bytes | str) -> DecodedRecord:
    return msgspec.json.decode(raw, type=DecodedRecord)


def decode_stats_json(raw: bytes | str) -> WrappedStats:
    return msgspec.json.decode(raw, type=WrappedStats)


__all__ = [
    "DecodedRecord",
    "RouteAggregate",
    "RouteRef",
    "TopicAggregate",
    "TopicRef",
    "WrappedStats",
    "decode_record_json",
    "decode_stats_json",
    "encode_json",
]
