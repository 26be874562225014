from __future__ import annotations

from wrapped.reference import (
    ROUTE_GROUPS,
    TOPIC_FLAG_FIRST,
    TOPIC_FLAG_LAST,
    TOPICS,
    UNKNOWN_LABEL,
    Character,
    Ending,
    Objective,
    SideCharacter,
    TopicType,
    all_routes,
    character_label,
    ending_label,
    ending_labels,
    route_by_flag,
    side_character_label,
    topic_by_flag,
    topics_for_episode,
)


def test_route_groups_cover_every_chapter_selection() -> None:
    assert [len(group) for group in ROUTE_GROUPS] == [16, 18, 16, 8, 10, 22, 13]
    flags = [route.flag for route in all_routes()]
    assert len(flags) == len(set(flags))


def test_route_lookup_by_flag() -> None:
    route = route_by_flag(1025)
    assert route is not None
    assert route.name == "chokuretsu-wrapped-ep1-working-with-koizumi"
    assert route.characters == (Character.KOIZUMI,)
    assert route.objective is Objective.A
    assert route.side_characters == (SideCharacter.MEMBER_A, SideCharacter.PRESIDENT, SideCharacter.SISTER)
    assert route_by_flag(1045) is None


def test_topics_are_sorted_unique_and_inside_range() -> None:
    flags = [topic.flag for topic in TOPICS]
    assert len(flags) == 510
    assert flags == sorted(set(flags))
    assert flags[0] == TOPIC_FLAG_FIRST
    assert flags[-1] == TOPIC_FLAG_LAST


def test_topic_lookup_by_flag() -> None:
    topic = topic_by_flag(130)
    assert topic is not None
    assert topic.name == "chokuretsu-wrapped-topic-stray-cat"
    assert topic.episode == 3
    assert topic.topic_type is TopicType.MAIN
    # Holes in the topic range have no entry.
    assert topic_by_flag(151) is None


def test_topics_for_episode_partitions_table() -> None:
    total = sum(len(topics_for_episode(episode)) for episode in range(1, 6))
    assert total == len(TOPICS)
    assert all(topic.episode == 1 for topic in topics_for_episode(1))


def test_labels() -> None:
    assert character_label(Character.HARUHI) == "chokuretsu-wrapped-haruhi"
    assert side_character_label(SideCharacter.GIRL) == "chokuretsu-wrapped-mystery-girl"
    assert side_character_label(SideCharacter.MEMBER_C) == "chokuretsu-wrapped-member-c"
    assert ending_label(Ending.TSURUYA) == "chokuretsu-wrapped-tsuruya"
    assert ending_label(None) == UNKNOWN_LABEL
    assert character_label(99) == UNKNOWN_LABEL
    assert ending_labels()[-1] == UNKNOWN_LABEL
    assert len(ending_labels()) == len(Ending) + 1
