from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

from .records import DecodedRecord, RouteAggregate, RouteRef, TopicAggregate, TopicRef, WrappedStats
from .reference import ROUTE_GROUPS, TOPICS, character_labels, ending_labels, side_character_labels
from .rules import (
    EP1_ACTIVITY_GUESS,
    EP1_COMP_SOC_INTERVIEWS,
    EP1_MEMORY_CARD,
    EP1_RESOLUTION,
    GAME_OVER_DIDNT_SEE_LABEL,
    GAME_OVER_SAW_LABEL,
)


def _mean(total: float, count: int) -> float:
    return float(total) / float(count if count > 0 else 1)


def _histogram(values: Iterable[str], labels: Iterable[str] = ()) -> dict[str, int]:
    """Count `values`, seeding every known label with zero first."""

    chart = {label: 0 for label in labels}
    for value in values:
        chart[value] = chart.get(value, 0) + 1
    return chart


def _numeric_histogram(values: Iterable[int], keys: Iterable[int] = ()) -> dict[str, int]:
    counts = Counter(int(value) for value in values)
    for key in keys:
        counts.setdefault(int(key), 0)
    return {str(key): counts[key] for key in sorted(counts)}


def _per_key_means(mappings: Sequence[dict[str, int]], labels: Iterable[str]) -> dict[str, float]:
    return {label: _mean(sum(mapping.get(label, 0) for mapping in mappings), len(mappings)) for label in labels}


def aggregate(records: Sequence[DecodedRecord]) -> WrappedStats:
    """Fold every stored record into one snapshot.

    Pure function of its input. Every statically known ending, route, topic and
    episode outcome is present in the output even when nothing hit it.
    """

    saves = [record for record in records if record.is_valid]
    count = len(saves)
    stats = WrappedStats(num_submissions=count)

    friend_saves = [record for record in saves if record.has_friendship]
    friend_count = len(friend_saves)
    stats.num_friendship_submissions = friend_count
    stats.haruhi_friendship_level = _mean(sum(r.haruhi_friendship_level for r in friend_saves), friend_count)
    stats.mikuru_friendship_level = _mean(sum(r.mikuru_friendship_level for r in friend_saves), friend_count)
    stats.nagato_friendship_level = _mean(sum(r.nagato_friendship_level for r in friend_saves), friend_count)
    stats.koizumi_friendship_level = _mean(sum(r.koizumi_friendship_level for r in friend_saves), friend_count)
    stats.tsuruya_friendship_level = _mean(sum(r.tsuruya_friendship_level for r in friend_saves), friend_count)

    stats.ending_chart = _histogram((r.unlocked_ending for r in saves), ending_labels())

    stats.average_topics_obtained = _mean(sum(r.num_topics_obtained for r in saves), count)
    stats.topics_obtained_chart = _numeric_histogram(r.num_topics_obtained for r in saves)
    topic_counts = Counter(topic.flag for r in saves for topic in r.topics_obtained)
    stats.topics_collected = [
        TopicAggregate(topic=TopicRef.from_topic(topic), count=topic_counts.get(topic.flag, 0)) for topic in TOPICS
    ]

    # Matched by flag: labels are display strings and are not guaranteed unique.
    route_counts = Counter(route.flag for r in saves for route in r.routes_taken)
    stats.routes_taken = [
        [RouteAggregate(route=RouteRef.from_route(route), count=route_counts.get(route.flag, 0)) for route in group]
        for group in ROUTE_GROUPS
    ]
    stats.routes_count_max = max((entry.count for group in stats.routes_taken for entry in group), default=0)
    stats.average_routes_with_character = _per_key_means([r.routes_with_character for r in saves], character_labels())
    stats.average_routes_with_side_character = _per_key_means(
        [r.routes_with_side_character for r in saves],
        side_character_labels(),
    )

    stats.average_haruhi_meter = _mean(sum(r.haruhi_meter for r in saves), count)

    saw_game_over = sum(1 for r in saves if r.saw_game_over_tutorial)
    stats.saw_game_over_tutorial_chart = {
        GAME_OVER_SAW_LABEL: saw_game_over,
        GAME_OVER_DIDNT_SEE_LABEL: count - saw_game_over,
    }
    stats.ep1_activity_guess_chart = _histogram((r.ep1_activity_guess for r in saves), EP1_ACTIVITY_GUESS.labels())
    stats.num_comp_soc_members_interviewed_chart = _numeric_histogram(
        (r.num_comp_soc_members_interviewed for r in saves),
        EP1_COMP_SOC_INTERVIEWS.possible_counts(),
    )
    stats.ep1_memory_card_chart = _histogram((r.ep1_did_what_with_memory_card for r in saves), EP1_MEMORY_CARD.labels())
    stats.ep1_resolution_chart = _histogram((r.ep1_resolution for r in saves), EP1_RESOLUTION.labels())
    return stats


def empty_stats() -> WrappedStats:
    return aggregate(())


__all__ = [
    "aggregate",
    "empty_stats",
]
