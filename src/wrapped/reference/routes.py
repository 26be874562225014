from __future__ import annotations

"""Route flags per chapter selection screen.

Each group is one chapter's route selection. Only one route per group can be
taken in a playthrough, and groups are scanned in declared order, so the
order of entries inside a group matters.
"""

from .types import Character, Objective, Route, SideCharacter

EP1_ROUTES: tuple[Route, ...] = (
    Route(1022, "chokuretsu-wrapped-ep1-working-alone", (), Objective.A, (SideCharacter.MEMBER_A, SideCharacter.MEMBER_B, SideCharacter.PRESIDENT)),
    Route(1023, "chokuretsu-wrapped-ep1-with-mikuru", (Character.MIKURU,), Objective.A, (SideCharacter.MEMBER_A, SideCharacter.MEMBER_B, SideCharacter.PRESIDENT)),
    Route(1024, "chokuretsu-wrapped-ep1-with-nagato", (Character.NAGATO,), Objective.A, (SideCharacter.MEMBER_A, SideCharacter.MEMBER_B, SideCharacter.PRESIDENT)),
    Route(1025, "chokuretsu-wrapped-ep1-working-with-koizumi", (Character.KOIZUMI,), Objective.A, (SideCharacter.MEMBER_A, SideCharacter.PRESIDENT, SideCharacter.SISTER)),
    Route(1026, "chokuretsu-wrapped-ep1-flower-in-each-hand", (Character.MIKURU, Character.NAGATO), Objective.A, (SideCharacter.MEMBER_A, SideCharacter.PRESIDENT)),
    Route(1027, "chokuretsu-wrapped-ep1-koizumis-plan", (Character.MIKURU, Character.KOIZUMI), Objective.A, (SideCharacter.MEMBER_A, SideCharacter.MEMBER_B, SideCharacter.PRESIDENT)),
    Route(1028, "chokuretsu-wrapped-ep1-the-cool-two", (Character.NAGATO, Character.KOIZUMI), Objective.A, (SideCharacter.MEMBER_A, SideCharacter.PRESIDENT)),
    Route(1029, "chokuretsu-wrapped-ep1-everyone-to-the-computer-society", (Character.MIKURU, Character.NAGATO, Character.KOIZUMI), Objective.A, (SideCharacter.MEMBER_A, SideCharacter.MEMBER_B, SideCharacter.MEMBER_C, SideCharacter.PRESIDENT)),
    Route(1030, "chokuretsu-wrapped-ep1-alone-with-haruhi", (Character.HARUHI,), Objective.B, ()),
    Route(1031, "chokuretsu-wrapped-ep1-boisterous-girls", (Character.HARUHI, Character.MIKURU), Objective.B, (SideCharacter.SISTER,)),
    Route(1032, "chokuretsu-wrapped-ep1-haruhi-and-nagato", (Character.HARUHI, Character.NAGATO), Objective.B, ()),
    Route(1033, "chokuretsu-wrapped-ep1-a-point-of-reference", (Character.HARUHI, Character.KOIZUMI), Objective.B, ()),
    Route(1034, "chokuretsu-wrapped-ep1-preliminary-investigation", (Character.HARUHI, Character.MIKURU, Character.NAGATO), Objective.B, ()),
    Route(1035, "chokuretsu-wrapped-ep1-sos-brigade-activity-record", (Character.HARUHI, Character.MIKURU, Character.KOIZUMI), Objective.B, ()),
    Route(1036, "chokuretsu-wrapped-ep1-second-raid", (Character.HARUHI, Character.NAGATO, Character.KOIZUMI), Objective.B, (SideCharacter.MEMBER_A, SideCharacter.MEMBER_B, SideCharacter.PRESIDENT)),
    Route(1037, "chokuretsu-wrapped-ep1-gathering-the-troops", (Character.HARUHI, Character.MIKURU, Character.NAGATO, Character.KOIZUMI), Objective.B, (SideCharacter.SISTER,)),
)

EP2_ROUTES: tuple[Route, ...] = (
    Route(1038, "chokuretsu-wrapped-ep2-reconfirmation", (), Objective.A, (SideCharacter.MEMBER_B, SideCharacter.PRESIDENT)),
    Route(1039, "chokuretsu-wrapped-ep2-consultation", (Character.MIKURU,), Objective.A, (SideCharacter.SISTER,)),
    Route(1040, "chokuretsu-wrapped-ep2-for-persuading-haruhi", (Character.NAGATO,), Objective.A, (SideCharacter.SISTER,)),
    Route(1041, "chokuretsu-wrapped-ep2-koizumis-proposition", (Character.KOIZUMI,), Objective.A, ()),
    Route(1042, "chokuretsu-wrapped-ep2-an-aged-timbre", (Character.MIKURU, Character.NAGATO), Objective.A, ()),
    Route(1043, "chokuretsu-wrapped-ep2-the-computer-societys-secret", (Character.MIKURU, Character.KOIZUMI), Objective.A, (SideCharacter.PRESIDENT,)),
    Route(1044, "chokuretsu-wrapped-ep2-suspicious-conduct", (Character.NAGATO, Character.KOIZUMI), Objective.A, (SideCharacter.MEMBER_B,)),
    Route(1046, "chokuretsu-wrapped-ep2-in-the-mountain-of-books", (Character.HARUHI,), Objective.B, ()),
    Route(1047, "chokuretsu-wrapped-ep2-in-charge-of-odd-jobs", (Character.HARUHI, Character.MIKURU), Objective.B, ()),
    Route(1048, "chokuretsu-wrapped-ep2-reading-time", (Character.HARUHI, Character.NAGATO), Objective.B, (SideCharacter.SISTER,)),
    Route(1049, "chokuretsu-wrapped-ep2-hierarchy", (Character.HARUHI, Character.KOIZUMI), Objective.B, (SideCharacter.SISTER,)),
    Route(1053, "chokuretsu-wrapped-ep2-kyons-strenuous-effort", (), Objective.C, ()),
    Route(1054, "chokuretsu-wrapped-ep2-mikurus-great-work", (Character.MIKURU,), Objective.C, (SideCharacter.OKABE,)),
    Route(1055, "chokuretsu-wrapped-ep2-before-you-know-it", (Character.NAGATO,), Objective.C, ()),
    Route(1056, "chokuretsu-wrapped-ep2-in-anticipation", (Character.KOIZUMI,), Objective.C, (SideCharacter.OKABE,)),
    Route(1057, "chokuretsu-wrapped-ep2-poster", (Character.MIKURU, Character.NAGATO), Objective.C, (SideCharacter.SISTER, SideCharacter.TSURUYA)),
    Route(1058, "chokuretsu-wrapped-ep2-songwriting-contest", (Character.MIKURU, Character.KOIZUMI), Objective.C, ()),
    Route(1059, "chokuretsu-wrapped-ep2-north-highs-alumni", (Character.NAGATO, Character.KOIZUMI), Objective.C, ()),
)

EP3_ROUTES: tuple[Route, ...] = (
    Route(1061, "chokuretsu-wrapped-ep3-kyon-and-the-stray-cat", (), Objective.A, (SideCharacter.CAT, SideCharacter.GROCER, SideCharacter.SISTER)),
    Route(1062, "chokuretsu-wrapped-ep3-careless-mikuru", (Character.MIKURU,), Objective.A, (SideCharacter.GROCER,)),
    Route(1063, "chokuretsu-wrapped-ep3-difficult-choice", (Character.NAGATO,), Objective.A, ()),
    Route(1064, "chokuretsu-wrapped-ep3-lottery-ticket", (Character.KOIZUMI,), Objective.A, (SideCharacter.GROCER,)),
    Route(1065, "chokuretsu-wrapped-ep3-a-flower-in-each-hand-again", (Character.MIKURU, Character.NAGATO), Objective.A, (SideCharacter.GROCER, SideCharacter.SISTER)),
    Route(1066, "chokuretsu-wrapped-ep3-mikuru-and-the-stray-cat", (Character.MIKURU, Character.KOIZUMI), Objective.A, (SideCharacter.CAT, SideCharacter.GROCER)),
    Route(1067, "chokuretsu-wrapped-ep3-the-shopkeepers-favor", (Character.NAGATO, Character.KOIZUMI), Objective.A, (SideCharacter.GROCER, SideCharacter.SISTER)),
    Route(1068, "chokuretsu-wrapped-ep3-buying-too-much", (Character.MIKURU, Character.NAGATO, Character.KOIZUMI), Objective.A, (SideCharacter.CAT, SideCharacter.GROCER, SideCharacter.SISTER)),
    Route(1069, "chokuretsu-wrapped-ep3-haphazard", (Character.HARUHI,), Objective.B, (SideCharacter.SISTER,)),
    Route(1070, "chokuretsu-wrapped-ep3-the-maid-is-a-slugger", (Character.HARUHI, Character.MIKURU), Objective.B, (SideCharacter.SISTER,)),
    Route(1071, "chokuretsu-wrapped-ep3-wasted-effort", (Character.HARUHI, Character.NAGATO), Objective.B, ()),
    Route(1072, "chokuretsu-wrapped-ep3-a-mountain-of-oversights", (Character.HARUHI, Character.KOIZUMI), Objective.B, ()),
    Route(1073, "chokuretsu-wrapped-ep3-computer-society-in-a-bind", (Character.HARUHI, Character.MIKURU, Character.NAGATO), Objective.B, (SideCharacter.MEMBER_A, SideCharacter.PRESIDENT, SideCharacter.SISTER)),
    Route(1074, "chokuretsu-wrapped-ep3-derailment", (Character.HARUHI, Character.MIKURU, Character.KOIZUMI), Objective.B, (SideCharacter.SISTER,)),
    Route(1075, "chokuretsu-wrapped-ep3-handmade", (Character.HARUHI, Character.NAGATO, Character.KOIZUMI), Objective.B, ()),
    Route(1076, "chokuretsu-wrapped-ep3-a-mountain-and-a-molehill", (Character.HARUHI, Character.MIKURU, Character.NAGATO, Character.KOIZUMI), Objective.B, (SideCharacter.SISTER,)),
)

EP3_EVENING_ROUTES: tuple[Route, ...] = (
    Route(1077, "chokuretsu-wrapped-ep3-preparations", (Character.HARUHI,), Objective.C, (SideCharacter.KUNIKIDA, SideCharacter.SISTER, SideCharacter.TANIGUCHI)),
    Route(1078, "chokuretsu-wrapped-ep3-never-before-seen", (Character.HARUHI, Character.NAGATO), Objective.C, (SideCharacter.KUNIKIDA, SideCharacter.SISTER, SideCharacter.TANIGUCHI)),
    Route(1079, "chokuretsu-wrapped-ep3-lame-story", (Character.HARUHI, Character.KOIZUMI), Objective.C, (SideCharacter.KUNIKIDA, SideCharacter.SISTER, SideCharacter.TANIGUCHI)),
    Route(1080, "chokuretsu-wrapped-ep3-a-huge-bother", (Character.HARUHI, Character.NAGATO, Character.KOIZUMI), Objective.C, (SideCharacter.KUNIKIDA, SideCharacter.SISTER, SideCharacter.TANIGUCHI)),
    Route(1081, "chokuretsu-wrapped-ep3-feels-like-a-date", (Character.MIKURU,), Objective.D, (SideCharacter.TSURUYA,)),
    Route(1082, "chokuretsu-wrapped-ep3-nagato-and-a-little-sister", (Character.MIKURU, Character.NAGATO), Objective.D, (SideCharacter.SISTER, SideCharacter.TSURUYA)),
    Route(1083, "chokuretsu-wrapped-ep3-mikurus-disaster", (Character.MIKURU, Character.KOIZUMI), Objective.D, (SideCharacter.TSURUYA,)),
    Route(1084, "chokuretsu-wrapped-ep3-state-of-emergency", (Character.MIKURU, Character.NAGATO, Character.KOIZUMI), Objective.D, (SideCharacter.TSURUYA,)),
)

EP4_ROUTES: tuple[Route, ...] = (
    Route(1085, "chokuretsu-wrapped-ep4-poolside", (Character.HARUHI,), Objective.A, ()),
    Route(1086, "chokuretsu-wrapped-ep4-which-ones-the-moon", (Character.HARUHI, Character.MIKURU), Objective.A, ()),
    Route(1087, "chokuretsu-wrapped-ep4-to-our-intergalactic-friends", (Character.HARUHI, Character.NAGATO), Objective.A, ()),
    Route(1089, "chokuretsu-wrapped-ep4-group-work", (Character.KOIZUMI,), Objective.B, ()),
    Route(1090, "chokuretsu-wrapped-ep4-that-fellow-in-the-science-lab", (Character.MIKURU, Character.KOIZUMI), Objective.B, ()),
    Route(1091, "chokuretsu-wrapped-ep4-the-science-of-fear", (Character.NAGATO, Character.KOIZUMI), Objective.B, ()),
    Route(1093, "chokuretsu-wrapped-ep4-to-the-convenience-store-alone", (), Objective.C, ()),
    Route(1094, "chokuretsu-wrapped-ep4-mikurus-shopping", (Character.MIKURU,), Objective.C, ()),
    Route(1095, "chokuretsu-wrapped-ep4-what-nagato-wants", (Character.NAGATO,), Objective.C, ()),
    Route(1096, "chokuretsu-wrapped-ep4-a-shopping-bag-in-each-hand", (Character.MIKURU, Character.NAGATO), Objective.C, ()),
)

EP4_NIGHT_ROUTES: tuple[Route, ...] = (
    Route(1097, "chokuretsu-wrapped-ep4-the-last-stand", (Character.HARUHI,), Objective.A, ()),
    Route(1098, "chokuretsu-wrapped-ep4-bandage", (Character.HARUHI, Character.MIKURU), Objective.A, ()),
    Route(1099, "chokuretsu-wrapped-ep4-nagatos-fear", (Character.HARUHI, Character.NAGATO), Objective.A, ()),
    Route(1100, "chokuretsu-wrapped-ep4-the-rules-of-the-test-of-courage", (Character.HARUHI, Character.KOIZUMI), Objective.A, ()),
    Route(1101, "chokuretsu-wrapped-ep4-the-kingdom-of-shadows", (Character.HARUHI, Character.MIKURU, Character.NAGATO), Objective.A, ()),
    Route(1102, "chokuretsu-wrapped-ep4-i-cant-accept-it", (Character.HARUHI, Character.MIKURU, Character.KOIZUMI), Objective.A, ()),
    Route(1103, "chokuretsu-wrapped-ep4-trying-again", (Character.HARUHI, Character.NAGATO, Character.KOIZUMI), Objective.A, ()),
    Route(1105, "chokuretsu-wrapped-ep4-singing-your-own-praises", (), Objective.B, (SideCharacter.GIRL, SideCharacter.MEMBER_A, SideCharacter.MEMBER_B, SideCharacter.MEMBER_C, SideCharacter.PRESIDENT)),
    Route(1106, "chokuretsu-wrapped-ep4-unreliable-partner", (Character.MIKURU,), Objective.B, (SideCharacter.MEMBER_A, SideCharacter.PRESIDENT)),
    Route(1107, "chokuretsu-wrapped-ep4-reliable-partner", (Character.NAGATO,), Objective.B, (SideCharacter.MEMBER_A, SideCharacter.MEMBER_B, SideCharacter.MEMBER_C, SideCharacter.MEMBER_D, SideCharacter.PRESIDENT)),
    Route(1108, "chokuretsu-wrapped-ep4-give-and-take", (Character.KOIZUMI,), Objective.B, (SideCharacter.MEMBER_A, SideCharacter.MEMBER_B, SideCharacter.MEMBER_C, SideCharacter.PRESIDENT)),
    Route(1109, "chokuretsu-wrapped-ep4-both-extremes", (Character.MIKURU, Character.NAGATO), Objective.B, (SideCharacter.GIRL, SideCharacter.KUNIKIDA, SideCharacter.MEMBER_A, SideCharacter.MEMBER_B, SideCharacter.PRESIDENT, SideCharacter.TANIGUCHI)),
    Route(1110, "chokuretsu-wrapped-ep4-big-trouble", (Character.MIKURU, Character.KOIZUMI), Objective.B, (SideCharacter.GIRL, SideCharacter.KUNIKIDA, SideCharacter.MEMBER_A, SideCharacter.PRESIDENT, SideCharacter.TANIGUCHI)),
    Route(1111, "chokuretsu-wrapped-ep4-an-unexpected-reunion", (Character.NAGATO, Character.KOIZUMI), Objective.B, (SideCharacter.GIRL, SideCharacter.MEMBER_A, SideCharacter.MEMBER_B, SideCharacter.MEMBER_C, SideCharacter.MEMBER_D)),
    Route(1112, "chokuretsu-wrapped-ep4-traces", (Character.MIKURU, Character.NAGATO, Character.KOIZUMI), Objective.B, (SideCharacter.KUNIKIDA, SideCharacter.TANIGUCHI)),
    Route(1113, "chokuretsu-wrapped-ep4-extra-victims", (), Objective.C, (SideCharacter.KUNIKIDA, SideCharacter.TANIGUCHI)),
    Route(1114, "chokuretsu-wrapped-ep4-stolen-goods", (Character.MIKURU,), Objective.C, (SideCharacter.KUNIKIDA, SideCharacter.TANIGUCHI)),
    Route(1115, "chokuretsu-wrapped-ep4-a-merciless-individual", (Character.NAGATO,), Objective.C, (SideCharacter.KUNIKIDA, SideCharacter.TANIGUCHI)),
    Route(1116, "chokuretsu-wrapped-ep4-follow-them", (Character.NAGATO,), Objective.C, (SideCharacter.KUNIKIDA, SideCharacter.TANIGUCHI)),
    Route(1117, "chokuretsu-wrapped-ep4-unforeseen", (Character.MIKURU, Character.NAGATO), Objective.C, (SideCharacter.KUNIKIDA, SideCharacter.TANIGUCHI)),
    Route(1118, "chokuretsu-wrapped-ep4-uneasiness", (Character.MIKURU, Character.KOIZUMI), Objective.C, (SideCharacter.KUNIKIDA, SideCharacter.TANIGUCHI)),
    Route(1119, "chokuretsu-wrapped-ep4-theres-no-one-here", (Character.NAGATO, Character.KOIZUMI), Objective.C, (SideCharacter.KUNIKIDA, SideCharacter.MEMBER_A, SideCharacter.MEMBER_B, SideCharacter.PRESIDENT, SideCharacter.TANIGUCHI)),
)

EP5_ROUTES: tuple[Route, ...] = (
    Route(1121, "chokuretsu-wrapped-ep5-game", (Character.HARUHI,), Objective.A, ()),
    Route(1122, "chokuretsu-wrapped-ep5-miscalculation", (Character.HARUHI, Character.MIKURU), Objective.A, ()),
    Route(1123, "chokuretsu-wrapped-ep5-climax", (Character.HARUHI, Character.KOIZUMI), Objective.A, ()),
    Route(1124, "chokuretsu-wrapped-ep5-tournament", (Character.HARUHI, Character.MIKURU, Character.KOIZUMI), Objective.A, ()),
    Route(1125, "chokuretsu-wrapped-ep5-working-in-solitude", (), Objective.B, ()),
    Route(1126, "chokuretsu-wrapped-ep5-near-miss", (Character.MIKURU,), Objective.B, ()),
    Route(1127, "chokuretsu-wrapped-ep5-a-nearby-blind-spot", (Character.KOIZUMI,), Objective.B, ()),
    Route(1129, "chokuretsu-wrapped-ep5-straightforward-duty", (), Objective.C, ()),
    Route(1130, "chokuretsu-wrapped-ep5-state-of-emergency", (Character.MIKURU,), Objective.C, ()),
    Route(1131, "chokuretsu-wrapped-ep5-two-options", (Character.KOIZUMI,), Objective.C, ()),
    Route(1133, "chokuretsu-wrapped-ep5-trace-the-abnormality", (Character.NAGATO,), Objective.D, ()),
    Route(1134, "chokuretsu-wrapped-ep5-all-alone", (Character.MIKURU, Character.NAGATO), Objective.D, ()),
    Route(1135, "chokuretsu-wrapped-ep5-keeping-busy", (Character.NAGATO, Character.KOIZUMI), Objective.D, ()),
)

ROUTE_GROUPS: tuple[tuple[Route, ...], ...] = (
    EP1_ROUTES,
    EP2_ROUTES,
    EP3_ROUTES,
    EP3_EVENING_ROUTES,
    EP4_ROUTES,
    EP4_NIGHT_ROUTES,
    EP5_ROUTES,
)

ROUTE_BY_FLAG: dict[int, Route] = {route.flag: route for group in ROUTE_GROUPS for route in group}


def all_routes() -> list[Route]:
    return [route for group in ROUTE_GROUPS for route in group]


def route_by_flag(flag: int) -> Route | None:
    return ROUTE_BY_FLAG.get(int(flag))
