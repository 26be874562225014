from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

LABEL_PREFIX = "chokuretsu-wrapped-"
UNKNOWN_LABEL = f"{LABEL_PREFIX}unknown"


class Character(IntEnum):
    HARUHI = 0
    MIKURU = 1
    NAGATO = 2
    KOIZUMI = 3


class SideCharacter(IntEnum):
    CAT = 0
    GIRL = 1
    GROCER = 2
    KUNIKIDA = 3
    MEMBER_A = 4
    MEMBER_B = 5
    MEMBER_C = 6
    MEMBER_D = 7
    OKABE = 8
    PRESIDENT = 9
    SISTER = 10
    TANIGUCHI = 11
    TSURUYA = 12


class Ending(IntEnum):
    HARUHI = 0
    MIKURU = 1
    NAGATO = 2
    KOIZUMI = 3
    TSURUYA = 4


class Objective(IntEnum):
    """Objective column on the chapter route selection screen."""

    A = 0
    B = 1
    C = 2
    D = 3


class TopicType(IntEnum):
    MAIN = 0
    HARUHI = 1
    MIKURU = 2
    NAGATO = 3
    KOIZUMI = 4
    SUB = 5


_CHARACTER_LABELS: dict[Character, str] = {
    Character.HARUHI: f"{LABEL_PREFIX}haruhi",
    Character.MIKURU: f"{LABEL_PREFIX}mikuru",
    Character.NAGATO: f"{LABEL_PREFIX}nagato",
    Character.KOIZUMI: f"{LABEL_PREFIX}koizumi",
}

_SIDE_CHARACTER_LABELS: dict[SideCharacter, str] = {
    SideCharacter.CAT: f"{LABEL_PREFIX}cat",
    SideCharacter.GIRL: f"{LABEL_PREFIX}mystery-girl",
    SideCharacter.GROCER: f"{LABEL_PREFIX}grocer",
    SideCharacter.KUNIKIDA: f"{LABEL_PREFIX}kunikida",
    SideCharacter.MEMBER_A: f"{LABEL_PREFIX}member-a",
    SideCharacter.MEMBER_B: f"{LABEL_PREFIX}member-b",
    SideCharacter.MEMBER_C: f"{LABEL_PREFIX}member-c",
    SideCharacter.MEMBER_D: f"{LABEL_PREFIX}member-d",
    SideCharacter.OKABE: f"{LABEL_PREFIX}okabe",
    SideCharacter.PRESIDENT: f"{LABEL_PREFIX}president",
    SideCharacter.SISTER: f"{LABEL_PREFIX}sister",
    SideCharacter.TANIGUCHI: f"{LABEL_PREFIX}taniguchi",
    SideCharacter.TSURUYA: f"{LABEL_PREFIX}tsuruya",
}

# Ending labels are the character labels of the ending's heroine.
_ENDING_LABELS: dict[Ending, str] = {
    Ending.HARUHI: f"{LABEL_PREFIX}haruhi",
    Ending.MIKURU: f"{LABEL_PREFIX}mikuru",
    Ending.NAGATO: f"{LABEL_PREFIX}nagato",
    Ending.KOIZUMI: f"{LABEL_PREFIX}koizumi",
    Ending.TSURUYA: f"{LABEL_PREFIX}tsuruya",
}


def character_label(character: int) -> str:
    try:
        return _CHARACTER_LABELS[Character(int(character))]
    except (KeyError, ValueError):
        return UNKNOWN_LABEL


def side_character_label(side_character: int) -> str:
    try:
        return _SIDE_CHARACTER_LABELS[SideCharacter(int(side_character))]
    except (KeyError, ValueError):
        return UNKNOWN_LABEL


def ending_label(ending: int | None) -> str:
    if ending is None:
        return UNKNOWN_LABEL
    try:
        return _ENDING_LABELS[Ending(int(ending))]
    except (KeyError, ValueError):
        return UNKNOWN_LABEL


def character_labels() -> list[str]:
    return [character_label(character) for character in Character]


def side_character_labels() -> list[str]:
    return [side_character_label(side_character) for side_character in SideCharacter]


def ending_labels() -> list[str]:
    """Every ending label plus the unknown label, in enum order."""
    return [ending_label(ending) for ending in Ending] + [UNKNOWN_LABEL]


@dataclass(frozen=True, slots=True)
class Route:
    flag: int
    name: str
    characters: tuple[Character, ...]
    objective: Objective
    side_characters: tuple[SideCharacter, ...]


@dataclass(frozen=True, slots=True)
class Topic:
    flag: int
    name: str
    episode: int
    topic_type: TopicType
