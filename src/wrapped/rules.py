from __future__ import annotations

"""Declarative flag rules for the per-episode facts and the ending check.

Each rule is a small ordered table evaluated against a save slot. Keeping the
tables as data lets tests walk every case and lets the aggregator enumerate
every label a rule can produce.
"""

from dataclasses import dataclass
from typing import Protocol

from .reference import LABEL_PREFIX, UNKNOWN_LABEL, Ending, ending_label


class FlagSource(Protocol):
    def is_flag_set(self, flag: int) -> bool: ...


@dataclass(frozen=True, slots=True)
class RuleCase:
    flags: tuple[int, ...]
    label: str

    def matches(self, slot: FlagSource) -> bool:
        return any(slot.is_flag_set(flag) for flag in self.flags)


@dataclass(frozen=True, slots=True)
class FirstSetRule:
    """The first case with any of its flags set wins; `default` otherwise."""

    cases: tuple[RuleCase, ...]
    default: str

    def evaluate(self, slot: FlagSource) -> str:
        for case in self.cases:
            if case.matches(slot):
                return case.label
        return self.default

    def labels(self) -> list[str]:
        out: list[str] = []
        for label in [case.label for case in self.cases] + [self.default]:
            if label not in out:
                out.append(label)
        return out


@dataclass(frozen=True, slots=True)
class LastSetRule:
    """Every matching case overwrites the result, so the last match in order wins."""

    cases: tuple[RuleCase, ...]
    default: str

    def evaluate(self, slot: FlagSource) -> str:
        result = self.default
        for case in self.cases:
            if case.matches(slot):
                result = case.label
        return result

    def labels(self) -> list[str]:
        out: list[str] = []
        for label in [case.label for case in self.cases] + [self.default]:
            if label not in out:
                out.append(label)
        return out


@dataclass(frozen=True, slots=True)
class FlagAndNot:
    required: int
    forbidden: int

    def evaluate(self, slot: FlagSource) -> bool:
        return slot.is_flag_set(self.required) and not slot.is_flag_set(self.forbidden)


@dataclass(frozen=True, slots=True)
class StrideCount:
    """Count set flags in `start..stop` (inclusive) stepping by `step`."""

    start: int
    stop: int
    step: int

    def flags(self) -> range:
        return range(self.start, self.stop + 1, self.step)

    def evaluate(self, slot: FlagSource) -> int:
        return sum(1 for flag in self.flags() if slot.is_flag_set(flag))

    def possible_counts(self) -> range:
        return range(0, len(self.flags()) + 1)


# Check order is the reverse of the in-game priority: Tsuruya beats everything, then Haruhi.
ENDING_RULE = LastSetRule(
    cases=(
        RuleCase((4314,), ending_label(Ending.KOIZUMI)),
        RuleCase((4313,), ending_label(Ending.NAGATO)),
        RuleCase((4312,), ending_label(Ending.MIKURU)),
        RuleCase((4311,), ending_label(Ending.HARUHI)),
        RuleCase((4315,), ending_label(Ending.TSURUYA)),
    ),
    default=UNKNOWN_LABEL,
)

GAME_OVER_SAW_LABEL = f"{LABEL_PREFIX}game-over-saw"
GAME_OVER_DIDNT_SEE_LABEL = f"{LABEL_PREFIX}game-over-didnt-see"

# TR05 reached without EV1_002 SEL001.
SAW_GAME_OVER_TUTORIAL = FlagAndNot(required=1016, forbidden=1196)

EP1_ACTIVITY_GUESSES: tuple[str, ...] = (
    f"{LABEL_PREFIX}ep1-go-swimming",
    f"{LABEL_PREFIX}ep1-go-camping",
    f"{LABEL_PREFIX}ep1-summer-camp",
)
EP1_NO_ACTIVITY_GUESS = f"{LABEL_PREFIX}ep1-no-guess"

# EV1_001 SEL001..SEL003
EP1_ACTIVITY_GUESS = FirstSetRule(
    cases=tuple(RuleCase((1167 + idx,), label) for idx, label in enumerate(EP1_ACTIVITY_GUESSES)),
    default=EP1_NO_ACTIVITY_GUESS,
)

EP1_COMP_SOC_INTERVIEWS = StrideCount(start=1181, stop=1189, step=2)

EP1_MEMORY_CARD_ACTIONS: tuple[str, ...] = (
    f"{LABEL_PREFIX}ep1-took-memory-card",
    f"{LABEL_PREFIX}ep1-returned-memory-card",
    f"{LABEL_PREFIX}ep1-didnt-find-memory-card",
)

EP1_MEMORY_CARD = FirstSetRule(
    cases=(
        # EV1_003 SEL003, EV1_006 SEL003, EV1_008 SEL005, EV1_009 SEL006, EV1_010 SEL006
        RuleCase((1204, 1237, 1264, 1277, 1289), EP1_MEMORY_CARD_ACTIONS[0]),
        # EV1_003 SEL004, EV1_006 SEL004, EV1_008 SEL006, EV1_009 SEL005, EV1_010 SEL007
        RuleCase((1205, 1238, 1265, 1276, 1290), EP1_MEMORY_CARD_ACTIONS[1]),
    ),
    default=EP1_MEMORY_CARD_ACTIONS[2],
)

EP1_RESOLUTIONS: tuple[str, ...] = (
    f"{LABEL_PREFIX}ep1-h2o",
    f"{LABEL_PREFIX}ep1-swapped-plates",
    f"{LABEL_PREFIX}ep1-off-by-h2o-plates",
    f"{LABEL_PREFIX}ep1-a-misunderstanding",
)

# EV1_026, EV1_027, EV1_028, EV1_029
EP1_RESOLUTION = FirstSetRule(
    cases=tuple(RuleCase((1393 + idx * 3,), label) for idx, label in enumerate(EP1_RESOLUTIONS)),
    default=UNKNOWN_LABEL,
)


__all__ = [
    "ENDING_RULE",
    "EP1_ACTIVITY_GUESS",
    "EP1_ACTIVITY_GUESSES",
    "EP1_COMP_SOC_INTERVIEWS",
    "EP1_MEMORY_CARD",
    "EP1_MEMORY_CARD_ACTIONS",
    "EP1_NO_ACTIVITY_GUESS",
    "EP1_RESOLUTION",
    "EP1_RESOLUTIONS",
    "FirstSetRule",
    "FlagAndNot",
    "FlagSource",
    "GAME_OVER_DIDNT_SEE_LABEL",
    "GAME_OVER_SAW_LABEL",
    "LastSetRule",
    "RuleCase",
    "SAW_GAME_OVER_TUTORIAL",
    "StrideCount",
]
