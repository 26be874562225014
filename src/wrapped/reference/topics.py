from __future__ import annotations

"""Topic flags, in flag order.

Topics occupy the contiguous flag range 122..820, but the range has holes:
not every flag in it names a topic.
"""

from .types import Topic, TopicType

TOPIC_FLAG_FIRST = 122
TOPIC_FLAG_LAST = 820

TOPICS: tuple[Topic, ...] = (
    Topic(122, "chokuretsu-wrapped-topic-memory-card", 1, TopicType.MAIN),
    Topic(123, "chokuretsu-wrapped-topic-poster-misprint", 1, TopicType.MAIN),
    Topic(124, "chokuretsu-wrapped-topic-class-6-plate", 1, TopicType.MAIN),
    Topic(125, "chokuretsu-wrapped-topic-broken-music-box", 2, TopicType.MAIN),
    Topic(126, "chokuretsu-wrapped-topic-mysterious-sheet-music", 2, TopicType.MAIN),
    Topic(127, "chokuretsu-wrapped-topic-alumni-register", 2, TopicType.MAIN),
    Topic(128, "chokuretsu-wrapped-topic-contest-poster", 2, TopicType.MAIN),
    Topic(129, "chokuretsu-wrapped-topic-music-disc", 3, TopicType.MAIN),
    Topic(130, "chokuretsu-wrapped-topic-stray-cat", 3, TopicType.MAIN),
    Topic(131, "chokuretsu-wrapped-topic-cd-player", 3, TopicType.MAIN),
    Topic(132, "chokuretsu-wrapped-topic-science-textbook", 3, TopicType.MAIN),
    Topic(133, "chokuretsu-wrapped-topic-choir-club", 3, TopicType.MAIN),
    Topic(134, "chokuretsu-wrapped-topic-full-moon", 4, TopicType.MAIN),
    Topic(135, "chokuretsu-wrapped-topic-flashlight", 4, TopicType.MAIN),
    Topic(136, "chokuretsu-wrapped-topic-anatomical-model", 4, TopicType.MAIN),
    Topic(137, "chokuretsu-wrapped-topic-fireworks", 4, TopicType.MAIN),
    Topic(138, "chokuretsu-wrapped-topic-beach-ball", 4, TopicType.MAIN),
    Topic(139, "chokuretsu-wrapped-topic-shadow-puppetry", 4, TopicType.MAIN),
    Topic(140, "chokuretsu-wrapped-topic-spirit-photograph", 4, TopicType.MAIN),
    Topic(141, "chokuretsu-wrapped-topic-stain-on-the-wall", 4, TopicType.MAIN),
    Topic(142, "chokuretsu-wrapped-topic-photosynthesis", 4, TopicType.MAIN),
    Topic(143, "chokuretsu-wrapped-topic-dragging-marks", 4, TopicType.MAIN),
    Topic(144, "chokuretsu-wrapped-topic-petals", 4, TopicType.MAIN),
    Topic(145, "chokuretsu-wrapped-topic-twins", 5, TopicType.MAIN),
    Topic(146, "chokuretsu-wrapped-topic-hastily-scribbled-notes", 5, TopicType.MAIN),
    Topic(147, "chokuretsu-wrapped-topic-cell-phone", 5, TopicType.MAIN),
    Topic(148, "chokuretsu-wrapped-topic-new-ability", 5, TopicType.MAIN),
    Topic(149, "chokuretsu-wrapped-topic-curtain", 5, TopicType.MAIN),
    Topic(150, "chokuretsu-wrapped-topic-spot", 5, TopicType.MAIN),
    Topic(154, "chokuretsu-wrapped-topic-moths-and-flames", 5, TopicType.MAIN),
    Topic(155, "chokuretsu-wrapped-topic-reflection", 5, TopicType.MAIN),
    Topic(202, "chokuretsu-wrapped-topic-haruhi-and-kyon", 1, TopicType.HARUHI),
    Topic(203, "chokuretsu-wrapped-topic-sos-brigade-chief", 1, TopicType.HARUHI),
    Topic(204, "chokuretsu-wrapped-topic-alpha-wolf", 1, TopicType.HARUHI),
    Topic(205, "chokuretsu-wrapped-topic-brigade-chief-tyranny?!", 1, TopicType.HARUHI),
    Topic(206, "chokuretsu-wrapped-topic-a-scientific-approach", 2, TopicType.HARUHI),
    Topic(207, "chokuretsu-wrapped-topic-the-best-brigade-chief", 2, TopicType.HARUHI),
    Topic(208, "chokuretsu-wrapped-topic-gentle-miss-brigade-chief", 3, TopicType.HARUHI),
    Topic(209, "chokuretsu-wrapped-topic-the-sos-brigade's-summer", 3, TopicType.HARUHI),
    Topic(210, "chokuretsu-wrapped-topic-haruhi's-pace", 4, TopicType.HARUHI),
    Topic(211, "chokuretsu-wrapped-topic-optimistic-haruhi", 4, TopicType.HARUHI),
    Topic(212, "chokuretsu-wrapped-topic-kyon's-position", 5, TopicType.HARUHI),
    Topic(213, "chokuretsu-wrapped-topic-tranquilizer", 5, TopicType.HARUHI),
    Topic(214, "chokuretsu-wrapped-topic-kyon's-treat", 5, TopicType.HARUHI),
    Topic(302, "chokuretsu-wrapped-topic-mikuru's-tea", 1, TopicType.MIKURU),
    Topic(303, "chokuretsu-wrapped-topic-mikuru-and-the-club-president", 1, TopicType.MIKURU),
    Topic(304, "chokuretsu-wrapped-topic-the-computer-club's-goddess", 1, TopicType.MIKURU),
    Topic(305, "chokuretsu-wrapped-topic-mikuru-the-popular-favorite", 1, TopicType.MIKURU),
    Topic(306, "chokuretsu-wrapped-topic-mikuru's-weak-point", 1, TopicType.MIKURU),
    Topic(307, "chokuretsu-wrapped-topic-mikuru-and-the-computer-club", 1, TopicType.MIKURU),
    Topic(308, "chokuretsu-wrapped-topic-mikuru's-drawing", 1, TopicType.MIKURU),
    Topic(309, "chokuretsu-wrapped-topic-mikuru's-scary-story", 1, TopicType.MIKURU),
    Topic(310, "chokuretsu-wrapped-topic-mikuru-and-the-occult", 1, TopicType.MIKURU),
    Topic(311, "chokuretsu-wrapped-topic-mikuru-and-nagato", 1, TopicType.MIKURU),
    Topic(312, "chokuretsu-wrapped-topic-stained-book", 1, TopicType.MIKURU),
    Topic(313, "chokuretsu-wrapped-topic-plain-handkerchief", 1, TopicType.MIKURU),
    Topic(314, "chokuretsu-wrapped-topic-mikuru's-tears", 2, TopicType.MIKURU),
    Topic(315, "chokuretsu-wrapped-topic-mikuru's-cowardice", 2, TopicType.MIKURU),
    Topic(316, "chokuretsu-wrapped-topic-help-from-mikuru", 2, TopicType.MIKURU),
    Topic(317, "chokuretsu-wrapped-topic-mikuru's-snacks", 2, TopicType.MIKURU),
    Topic(318, "chokuretsu-wrapped-topic-mikuru's-trust-i", 2, TopicType.MIKURU),
    Topic(319, "chokuretsu-wrapped-topic-forgetful-mikuru", 2, TopicType.MIKURU),
    Topic(320, "chokuretsu-wrapped-topic-mikuru-the-klutz", 2, TopicType.MIKURU),
    Topic(325, "chokuretsu-wrapped-topic-passion-for-serving-tea", 2, TopicType.MIKURU),
    Topic(326, "chokuretsu-wrapped-topic-mikuru-and-tea-candies", 2, TopicType.MIKURU),
    Topic(327, "chokuretsu-wrapped-topic-mikuru's-flowers", 2, TopicType.MIKURU),
    Topic(328, "chokuretsu-wrapped-topic-careless-mikuru", 2, TopicType.MIKURU),
    Topic(330, "chokuretsu-wrapped-topic-mikuru's-recipe", 3, TopicType.MIKURU),
    Topic(331, "chokuretsu-wrapped-topic-mikuru's-calculator", 3, TopicType.MIKURU),
    Topic(332, "chokuretsu-wrapped-topic-mikuru's-efforts", 3, TopicType.MIKURU),
    Topic(333, "chokuretsu-wrapped-topic-a-flower-in-each-hand", 3, TopicType.MIKURU),
    Topic(334, "chokuretsu-wrapped-topic-mikuru-and-the-banana", 3, TopicType.MIKURU),
    Topic(335, "chokuretsu-wrapped-topic-dieting", 3, TopicType.MIKURU),
    Topic(336, "chokuretsu-wrapped-topic-mikuru-feels-regretful", 3, TopicType.MIKURU),
    Topic(337, "chokuretsu-wrapped-topic-kindness-towards-the-elderly", 3, TopicType.MIKURU),
    Topic(338, "chokuretsu-wrapped-topic-pom-poms", 3, TopicType.MIKURU),
    Topic(339, "chokuretsu-wrapped-topic-mikuru's-hands", 3, TopicType.MIKURU),
    Topic(340, "chokuretsu-wrapped-topic-mikuru's-towel", 3, TopicType.MIKURU),
    Topic(341, "chokuretsu-wrapped-topic-staff-room-happenings", 3, TopicType.MIKURU),
    Topic(342, "chokuretsu-wrapped-topic-president's-intense-stare", 3, TopicType.MIKURU),
    Topic(343, "chokuretsu-wrapped-topic-mikuru's-job", 3, TopicType.MIKURU),
    Topic(344, "chokuretsu-wrapped-topic-permission-to-borrow", 3, TopicType.MIKURU),
    Topic(345, "chokuretsu-wrapped-topic-fight-with-your-body", 3, TopicType.MIKURU),
    Topic(346, "chokuretsu-wrapped-topic-mikuru's-shield", 3, TopicType.MIKURU),
    Topic(347, "chokuretsu-wrapped-topic-seeing-things", 3, TopicType.MIKURU),
    Topic(348, "chokuretsu-wrapped-topic-feels-like-a-date", 3, TopicType.MIKURU),
    Topic(349, "chokuretsu-wrapped-topic-ice-cream-date", 3, TopicType.MIKURU),
    Topic(350, "chokuretsu-wrapped-topic-tripping-on-a-stone", 3, TopicType.MIKURU),
    Topic(351, "chokuretsu-wrapped-topic-mikuru's-trust-ii", 3, TopicType.MIKURU),
    Topic(352, "chokuretsu-wrapped-topic-plastic-bottle", 3, TopicType.MIKURU),
    Topic(353, "chokuretsu-wrapped-topic-maids-are-culture", 4, TopicType.MIKURU),
    Topic(354, "chokuretsu-wrapped-topic-mikuru's-gratitude", 4, TopicType.MIKURU),
    Topic(355, "chokuretsu-wrapped-topic-mikuru's-panic", 4, TopicType.MIKURU),
    Topic(356, "chokuretsu-wrapped-topic-mikuru's-warmth", 4, TopicType.MIKURU),
    Topic(357, "chokuretsu-wrapped-topic-mikuru's-drink", 4, TopicType.MIKURU),
    Topic(358, "chokuretsu-wrapped-topic-toy-phone", 4, TopicType.MIKURU),
    Topic(359, "chokuretsu-wrapped-topic-mikuru's-story", 4, TopicType.MIKURU),
    Topic(360, "chokuretsu-wrapped-topic-orange-juice", 4, TopicType.MIKURU),
    Topic(361, "chokuretsu-wrapped-topic-mikuru's-value", 4, TopicType.MIKURU),
    Topic(362, "chokuretsu-wrapped-topic-mikuru-invincibility-scheme", 4, TopicType.MIKURU),
    Topic(363, "chokuretsu-wrapped-topic-gentle-consideration", 4, TopicType.MIKURU),
    Topic(364, "chokuretsu-wrapped-topic-classified-information", 4, TopicType.MIKURU),
    Topic(365, "chokuretsu-wrapped-topic-mikuru's-respect", 4, TopicType.MIKURU),
    Topic(366, "chokuretsu-wrapped-topic-mikuru's-trembling", 4, TopicType.MIKURU),
    Topic(367, "chokuretsu-wrapped-topic-mikuru's-pen", 4, TopicType.MIKURU),
    Topic(368, "chokuretsu-wrapped-topic-mikuru's-motivation", 4, TopicType.MIKURU),
    Topic(369, "chokuretsu-wrapped-topic-mikuru's-support", 4, TopicType.MIKURU),
    Topic(370, "chokuretsu-wrapped-topic-mikuru's-delight", 4, TopicType.MIKURU),
    Topic(371, "chokuretsu-wrapped-topic-teary-eyed-mikuru", 4, TopicType.MIKURU),
    Topic(372, "chokuretsu-wrapped-topic-airheaded-mikuru", 4, TopicType.MIKURU),
    Topic(373, "chokuretsu-wrapped-topic-soft-hands", 4, TopicType.MIKURU),
    Topic(374, "chokuretsu-wrapped-topic-haruhi's-sympathizer", 4, TopicType.MIKURU),
    Topic(375, "chokuretsu-wrapped-topic-mikuru's-kindness", 4, TopicType.MIKURU),
    Topic(376, "chokuretsu-wrapped-topic-old-brooch", 4, TopicType.MIKURU),
    Topic(377, "chokuretsu-wrapped-topic-nice-assist", 4, TopicType.MIKURU),
    Topic(378, "chokuretsu-wrapped-topic-mikuru's-bodyguard", 4, TopicType.MIKURU),
    Topic(379, "chokuretsu-wrapped-topic-mikuru-the-worrywart", 4, TopicType.MIKURU),
    Topic(380, "chokuretsu-wrapped-topic-mikuru's-feelings", 5, TopicType.MIKURU),
    Topic(381, "chokuretsu-wrapped-topic-serious-mikuru", 5, TopicType.MIKURU),
    Topic(382, "chokuretsu-wrapped-topic-the-benefits-of-tea", 5, TopicType.MIKURU),
    Topic(383, "chokuretsu-wrapped-topic-request", 5, TopicType.MIKURU),
    Topic(384, "chokuretsu-wrapped-topic-loss-of-self-confidence", 5, TopicType.MIKURU),
    Topic(385, "chokuretsu-wrapped-topic-working-together-with-mikuru", 5, TopicType.MIKURU),
    Topic(386, "chokuretsu-wrapped-topic-wink", 5, TopicType.MIKURU),
    Topic(387, "chokuretsu-wrapped-topic-lucky-girl", 5, TopicType.MIKURU),
    Topic(388, "chokuretsu-wrapped-topic-positive", 5, TopicType.MIKURU),
    Topic(389, "chokuretsu-wrapped-topic-nice-mikuru", 5, TopicType.MIKURU),
    Topic(390, "chokuretsu-wrapped-topic-mikuru-the-phantom-thief?", 5, TopicType.MIKURU),
    Topic(391, "chokuretsu-wrapped-topic-mikuru's-competitive-spirit", 5, TopicType.MIKURU),
    Topic(392, "chokuretsu-wrapped-topic-mikuru's-courage", 5, TopicType.MIKURU),
    Topic(402, "chokuretsu-wrapped-topic-nagato's-book-search", 1, TopicType.NAGATO),
    Topic(403, "chokuretsu-wrapped-topic-nagato's-affiliation", 1, TopicType.NAGATO),
    Topic(404, "chokuretsu-wrapped-topic-nagato's-interest", 1, TopicType.NAGATO),
    Topic(405, "chokuretsu-wrapped-topic-nagato's-composure", 1, TopicType.NAGATO),
    Topic(406, "chokuretsu-wrapped-topic-nagato-and-the-pc", 1, TopicType.NAGATO),
    Topic(407, "chokuretsu-wrapped-topic-nagato's-silence", 1, TopicType.NAGATO),
    Topic(408, "chokuretsu-wrapped-topic-tough-girl-nagato", 1, TopicType.NAGATO),
    Topic(409, "chokuretsu-wrapped-topic-nagato's-souvenir", 1, TopicType.NAGATO),
    Topic(410, "chokuretsu-wrapped-topic-na-cat-o", 1, TopicType.NAGATO),
    Topic(411, "chokuretsu-wrapped-topic-nagato's-sixth-sense", 1, TopicType.NAGATO),
    Topic(412, "chokuretsu-wrapped-topic-nagato's-design-document", 1, TopicType.NAGATO),
    Topic(413, "chokuretsu-wrapped-topic-nagato's-apology", 1, TopicType.NAGATO),
    Topic(414, "chokuretsu-wrapped-topic-nagato's-book", 2, TopicType.NAGATO),
    Topic(415, "chokuretsu-wrapped-topic-nagato's-stance", 2, TopicType.NAGATO),
    Topic(416, "chokuretsu-wrapped-topic-nagato's-cooperation", 2, TopicType.NAGATO),
    Topic(417, "chokuretsu-wrapped-topic-nagato's-complaint", 2, TopicType.NAGATO),
    Topic(418, "chokuretsu-wrapped-topic-super-speed-reader-nagato", 2, TopicType.NAGATO),
    Topic(419, "chokuretsu-wrapped-topic-nagato's-probability-note", 2, TopicType.NAGATO),
    Topic(420, "chokuretsu-wrapped-topic-nagato's-hint-i", 2, TopicType.NAGATO),
    Topic(425, "chokuretsu-wrapped-topic-nagato-the-skilled", 2, TopicType.NAGATO),
    Topic(426, "chokuretsu-wrapped-topic-sit.", 2, TopicType.NAGATO),
    Topic(427, "chokuretsu-wrapped-topic-nagato's-pressed-flower", 2, TopicType.NAGATO),
    Topic(428, "chokuretsu-wrapped-topic-nagato's-bluntness", 2, TopicType.NAGATO),
    Topic(430, "chokuretsu-wrapped-topic-trust-in-nagato", 3, TopicType.NAGATO),
    Topic(431, "chokuretsu-wrapped-topic-curry-bread", 3, TopicType.NAGATO),
    Topic(432, "chokuretsu-wrapped-topic-nagato's-banana", 3, TopicType.NAGATO),
    Topic(433, "chokuretsu-wrapped-topic-nagato-and-meat", 3, TopicType.NAGATO),
    Topic(434, "chokuretsu-wrapped-topic-marshmallow", 3, TopicType.NAGATO),
    Topic(435, "chokuretsu-wrapped-topic-muryo-taisu", 3, TopicType.NAGATO),
    Topic(436, "chokuretsu-wrapped-topic-nagato's-sigh", 3, TopicType.NAGATO),
    Topic(437, "chokuretsu-wrapped-topic-nagato's-wisdom", 3, TopicType.NAGATO),
    Topic(438, "chokuretsu-wrapped-topic-nagato-and-curry", 3, TopicType.NAGATO),
    Topic(439, "chokuretsu-wrapped-topic-walking-encyclopedia", 3, TopicType.NAGATO),
    Topic(440, "chokuretsu-wrapped-topic-nagato-and-puzzles", 3, TopicType.NAGATO),
    Topic(441, "chokuretsu-wrapped-topic-coordinates", 3, TopicType.NAGATO),
    Topic(442, "chokuretsu-wrapped-topic-identifying-trouble", 3, TopicType.NAGATO),
    Topic(443, "chokuretsu-wrapped-topic-tin-soldiers", 3, TopicType.NAGATO),
    Topic(444, "chokuretsu-wrapped-topic-nagato's-hint-ii", 3, TopicType.NAGATO),
    Topic(445, "chokuretsu-wrapped-topic-information-warfare", 3, TopicType.NAGATO),
    Topic(446, "chokuretsu-wrapped-topic-out-of-touch", 3, TopicType.NAGATO),
    Topic(447, "chokuretsu-wrapped-topic-skewer-of-ultimate-misfortune", 3, TopicType.NAGATO),
    Topic(448, "chokuretsu-wrapped-topic-bowl", 3, TopicType.NAGATO),
    Topic(449, "chokuretsu-wrapped-topic-shaved-ice-date", 3, TopicType.NAGATO),
    Topic(450, "chokuretsu-wrapped-topic-insert-advertisement", 3, TopicType.NAGATO),
    Topic(451, "chokuretsu-wrapped-topic-nagato's-slide-rule", 4, TopicType.NAGATO),
    Topic(452, "chokuretsu-wrapped-topic-nagato's-amulet", 4, TopicType.NAGATO),
    Topic(453, "chokuretsu-wrapped-topic-unable-to-respond", 4, TopicType.NAGATO),
    Topic(454, "chokuretsu-wrapped-topic-capable-nagato", 4, TopicType.NAGATO),
    Topic(455, "chokuretsu-wrapped-topic-cicada-shell", 4, TopicType.NAGATO),
    Topic(456, "chokuretsu-wrapped-topic-chocolate", 4, TopicType.NAGATO),
    Topic(457, "chokuretsu-wrapped-topic-subculture-magazine", 4, TopicType.NAGATO),
    Topic(458, "chokuretsu-wrapped-topic-mineral-water", 4, TopicType.NAGATO),
    Topic(459, "chokuretsu-wrapped-topic-nagato's-consent", 4, TopicType.NAGATO),
    Topic(460, "chokuretsu-wrapped-topic-nagato's-handheld-mirror", 4, TopicType.NAGATO),
    Topic(461, "chokuretsu-wrapped-topic-nagato's-backup", 4, TopicType.NAGATO),
    Topic(462, "chokuretsu-wrapped-topic-nagato's-appraisal", 4, TopicType.NAGATO),
    Topic(463, "chokuretsu-wrapped-topic-nagato's-glasses", 4, TopicType.NAGATO),
    Topic(464, "chokuretsu-wrapped-topic-nagato's-curry", 4, TopicType.NAGATO),
    Topic(465, "chokuretsu-wrapped-topic-nagato's-reaction", 4, TopicType.NAGATO),
    Topic(466, "chokuretsu-wrapped-topic-the-charm", 4, TopicType.NAGATO),
    Topic(467, "chokuretsu-wrapped-topic-nagato's-stamp-of-approval", 4, TopicType.NAGATO),
    Topic(468, "chokuretsu-wrapped-topic-evidence?", 4, TopicType.NAGATO),
    Topic(469, "chokuretsu-wrapped-topic-dose-of-motivation", 4, TopicType.NAGATO),
    Topic(470, "chokuretsu-wrapped-topic-nagato's-triumphant-look", 4, TopicType.NAGATO),
    Topic(471, "chokuretsu-wrapped-topic-nagato's-estimation", 4, TopicType.NAGATO),
    Topic(472, "chokuretsu-wrapped-topic-nagato's-hand", 4, TopicType.NAGATO),
    Topic(473, "chokuretsu-wrapped-topic-nagato's-restraint", 4, TopicType.NAGATO),
    Topic(474, "chokuretsu-wrapped-topic-mysterious-mineral", 4, TopicType.NAGATO),
    Topic(475, "chokuretsu-wrapped-topic-instant-shutdown", 4, TopicType.NAGATO),
    Topic(476, "chokuretsu-wrapped-topic-chance-of-success", 4, TopicType.NAGATO),
    Topic(477, "chokuretsu-wrapped-topic-happiness", 4, TopicType.NAGATO),
    Topic(478, "chokuretsu-wrapped-topic-countermeasure", 5, TopicType.NAGATO),
    Topic(479, "chokuretsu-wrapped-topic-foresight", 5, TopicType.NAGATO),
    Topic(480, "chokuretsu-wrapped-topic-rendezvous-with-nagato", 5, TopicType.NAGATO),
    Topic(481, "chokuretsu-wrapped-topic-two-nagatos", 5, TopicType.NAGATO),
    Topic(482, "chokuretsu-wrapped-topic-incredibly-chivalrous-nagato", 5, TopicType.NAGATO),
    Topic(483, "chokuretsu-wrapped-topic-careful-explanation", 5, TopicType.NAGATO),
    Topic(484, "chokuretsu-wrapped-topic-neo-chess", 5, TopicType.NAGATO),
    Topic(502, "chokuretsu-wrapped-topic-koizumi's-flattery", 1, TopicType.KOIZUMI),
    Topic(503, "chokuretsu-wrapped-topic-a-clever-person", 1, TopicType.KOIZUMI),
    Topic(504, "chokuretsu-wrapped-topic-interesting-game", 1, TopicType.KOIZUMI),
    Topic(505, "chokuretsu-wrapped-topic-koizumi-and-the-computer", 1, TopicType.KOIZUMI),
    Topic(506, "chokuretsu-wrapped-topic-koizumi-and-the-game", 1, TopicType.KOIZUMI),
    Topic(507, "chokuretsu-wrapped-topic-koizumi's-inquiry", 1, TopicType.KOIZUMI),
    Topic(508, "chokuretsu-wrapped-topic-something-unusual", 1, TopicType.KOIZUMI),
    Topic(509, "chokuretsu-wrapped-topic-koizumi's-hypothesis", 1, TopicType.KOIZUMI),
    Topic(510, "chokuretsu-wrapped-topic-a-ghost's-true-form", 1, TopicType.KOIZUMI),
    Topic(511, "chokuretsu-wrapped-topic-superb-deputy-brigade-chief", 1, TopicType.KOIZUMI),
    Topic(512, "chokuretsu-wrapped-topic-prudent-koizumi", 1, TopicType.KOIZUMI),
    Topic(513, "chokuretsu-wrapped-topic-koizumi's-apology", 1, TopicType.KOIZUMI),
    Topic(514, "chokuretsu-wrapped-topic-esp", 2, TopicType.KOIZUMI),
    Topic(515, "chokuretsu-wrapped-topic-koizumi-the-nitpicker", 2, TopicType.KOIZUMI),
    Topic(516, "chokuretsu-wrapped-topic-the-koizumi-smile", 2, TopicType.KOIZUMI),
    Topic(517, "chokuretsu-wrapped-topic-koizumi-the-self-assured", 2, TopicType.KOIZUMI),
    Topic(518, "chokuretsu-wrapped-topic-koizumi's-cell-phone", 2, TopicType.KOIZUMI),
    Topic(519, "chokuretsu-wrapped-topic-koizumi's-candy", 2, TopicType.KOIZUMI),
    Topic(520, "chokuretsu-wrapped-topic-koizumi's-report", 2, TopicType.KOIZUMI),
    Topic(525, "chokuretsu-wrapped-topic-koizumi-the-prize-pupil", 2, TopicType.KOIZUMI),
    Topic(526, "chokuretsu-wrapped-topic-koizumi's-new-power?", 2, TopicType.KOIZUMI),
    Topic(527, "chokuretsu-wrapped-topic-koizumi's-haruhi-theory", 2, TopicType.KOIZUMI),
    Topic(528, "chokuretsu-wrapped-topic-koizumi's-advice", 2, TopicType.KOIZUMI),
    Topic(530, "chokuretsu-wrapped-topic-koizumi's-true-feelings", 3, TopicType.KOIZUMI),
    Topic(531, "chokuretsu-wrapped-topic-machiavellian-koizumi", 3, TopicType.KOIZUMI),
    Topic(532, "chokuretsu-wrapped-topic-lottery-ticket", 3, TopicType.KOIZUMI),
    Topic(533, "chokuretsu-wrapped-topic-koizumi's-calling", 3, TopicType.KOIZUMI),
    Topic(534, "chokuretsu-wrapped-topic-tendency-to-lecture", 3, TopicType.KOIZUMI),
    Topic(535, "chokuretsu-wrapped-topic-cheat-sheet", 3, TopicType.KOIZUMI),
    Topic(536, "chokuretsu-wrapped-topic-koizumi's-bitter-smile", 3, TopicType.KOIZUMI),
    Topic(537, "chokuretsu-wrapped-topic-madam-and-koizumi", 3, TopicType.KOIZUMI),
    Topic(538, "chokuretsu-wrapped-topic-koizumi's-gaze", 3, TopicType.KOIZUMI),
    Topic(539, "chokuretsu-wrapped-topic-koizumi's-dowsing-rod", 3, TopicType.KOIZUMI),
    Topic(540, "chokuretsu-wrapped-topic-koizumi's-matches", 3, TopicType.KOIZUMI),
    Topic(541, "chokuretsu-wrapped-topic-cowardly-koizumi", 3, TopicType.KOIZUMI),
    Topic(542, "chokuretsu-wrapped-topic-half-baked-koizumi", 3, TopicType.KOIZUMI),
    Topic(543, "chokuretsu-wrapped-topic-“agency”-non-involvement", 3, TopicType.KOIZUMI),
    Topic(544, "chokuretsu-wrapped-topic-koizumi's-hint", 3, TopicType.KOIZUMI),
    Topic(545, "chokuretsu-wrapped-topic-the-ends-justify-the-means", 3, TopicType.KOIZUMI),
    Topic(546, "chokuretsu-wrapped-topic-a-short-rest", 3, TopicType.KOIZUMI),
    Topic(547, "chokuretsu-wrapped-topic-koizumi's-warning", 3, TopicType.KOIZUMI),
    Topic(548, "chokuretsu-wrapped-topic-shower", 3, TopicType.KOIZUMI),
    Topic(549, "chokuretsu-wrapped-topic-koizumi's-trust", 3, TopicType.KOIZUMI),
    Topic(550, "chokuretsu-wrapped-topic-summer-schedule", 3, TopicType.KOIZUMI),
    Topic(551, "chokuretsu-wrapped-topic-skilled-koizumi", 4, TopicType.KOIZUMI),
    Topic(552, "chokuretsu-wrapped-topic-koizumi's-goddess?", 4, TopicType.KOIZUMI),
    Topic(553, "chokuretsu-wrapped-topic-look-of-envy", 4, TopicType.KOIZUMI),
    Topic(554, "chokuretsu-wrapped-topic-koizumi's-heinous-act", 4, TopicType.KOIZUMI),
    Topic(555, "chokuretsu-wrapped-topic-koizumi's-sarcasm", 4, TopicType.KOIZUMI),
    Topic(556, "chokuretsu-wrapped-topic-wealth-of-knowledge", 4, TopicType.KOIZUMI),
    Topic(557, "chokuretsu-wrapped-topic-capable-koizumi", 4, TopicType.KOIZUMI),
    Topic(558, "chokuretsu-wrapped-topic-tabletop-games", 4, TopicType.KOIZUMI),
    Topic(559, "chokuretsu-wrapped-topic-koizumi's-conversation-skills", 4, TopicType.KOIZUMI),
    Topic(560, "chokuretsu-wrapped-topic-koizumi's-“it's-up-to-you!”", 4, TopicType.KOIZUMI),
    Topic(561, "chokuretsu-wrapped-topic-harsh-koizumi", 4, TopicType.KOIZUMI),
    Topic(562, "chokuretsu-wrapped-topic-embarrassing-photo", 4, TopicType.KOIZUMI),
    Topic(563, "chokuretsu-wrapped-topic-koizumi's-supposition", 4, TopicType.KOIZUMI),
    Topic(564, "chokuretsu-wrapped-topic-koizumi's-gutsiness", 4, TopicType.KOIZUMI),
    Topic(565, "chokuretsu-wrapped-topic-koizumi's-nod", 4, TopicType.KOIZUMI),
    Topic(566, "chokuretsu-wrapped-topic-icy-stare", 4, TopicType.KOIZUMI),
    Topic(567, "chokuretsu-wrapped-topic-medicinal-herb", 4, TopicType.KOIZUMI),
    Topic(568, "chokuretsu-wrapped-topic-encouragement", 4, TopicType.KOIZUMI),
    Topic(569, "chokuretsu-wrapped-topic-koizumi's-gratitude", 4, TopicType.KOIZUMI),
    Topic(570, "chokuretsu-wrapped-topic-realism", 4, TopicType.KOIZUMI),
    Topic(571, "chokuretsu-wrapped-topic-bad-at-games", 4, TopicType.KOIZUMI),
    Topic(572, "chokuretsu-wrapped-topic-taniguchi-on-the-roof", 4, TopicType.KOIZUMI),
    Topic(573, "chokuretsu-wrapped-topic-koizumi's-pride", 4, TopicType.KOIZUMI),
    Topic(574, "chokuretsu-wrapped-topic-trust-in-koizumi", 4, TopicType.KOIZUMI),
    Topic(575, "chokuretsu-wrapped-topic-preaching-to-deaf-ears", 4, TopicType.KOIZUMI),
    Topic(576, "chokuretsu-wrapped-topic-shoulder-massage", 4, TopicType.KOIZUMI),
    Topic(577, "chokuretsu-wrapped-topic-visualization", 5, TopicType.KOIZUMI),
    Topic(578, "chokuretsu-wrapped-topic-koizumi,-the-main-act", 5, TopicType.KOIZUMI),
    Topic(579, "chokuretsu-wrapped-topic-a-tide-turning-move", 5, TopicType.KOIZUMI),
    Topic(580, "chokuretsu-wrapped-topic-tournament-bracket", 5, TopicType.KOIZUMI),
    Topic(581, "chokuretsu-wrapped-topic-koizumi's-silver-tongue", 5, TopicType.KOIZUMI),
    Topic(582, "chokuretsu-wrapped-topic-koizumi's-friend", 5, TopicType.KOIZUMI),
    Topic(583, "chokuretsu-wrapped-topic-camaraderie", 5, TopicType.KOIZUMI),
    Topic(584, "chokuretsu-wrapped-topic-koizumi's-own-way", 5, TopicType.KOIZUMI),
    Topic(585, "chokuretsu-wrapped-topic-koizumi's-keen-eyes", 5, TopicType.KOIZUMI),
    Topic(586, "chokuretsu-wrapped-topic-koizumi's-encouragement", 5, TopicType.KOIZUMI),
    Topic(587, "chokuretsu-wrapped-topic-koizumi's-self-confidence", 5, TopicType.KOIZUMI),
    Topic(588, "chokuretsu-wrapped-topic-simple-deduction", 5, TopicType.KOIZUMI),
    Topic(589, "chokuretsu-wrapped-topic-koizumi's-property", 5, TopicType.KOIZUMI),
    Topic(602, "chokuretsu-wrapped-topic-disappointment", 1, TopicType.SUB),
    Topic(603, "chokuretsu-wrapped-topic-japan,-the-nation-of-games", 1, TopicType.SUB),
    Topic(604, "chokuretsu-wrapped-topic-mascot", 1, TopicType.SUB),
    Topic(605, "chokuretsu-wrapped-topic-respect", 1, TopicType.SUB),
    Topic(606, "chokuretsu-wrapped-topic-the-clubroom-pc", 1, TopicType.SUB),
    Topic(607, "chokuretsu-wrapped-topic-literary-club", 1, TopicType.SUB),
    Topic(608, "chokuretsu-wrapped-topic-eye-strain", 1, TopicType.SUB),
    Topic(609, "chokuretsu-wrapped-topic-pc-game", 1, TopicType.SUB),
    Topic(610, "chokuretsu-wrapped-topic-board-game", 1, TopicType.SUB),
    Topic(611, "chokuretsu-wrapped-topic-warm-mood", 1, TopicType.SUB),
    Topic(612, "chokuretsu-wrapped-topic-sympathy", 1, TopicType.SUB),
    Topic(613, "chokuretsu-wrapped-topic-flattery", 1, TopicType.SUB),
    Topic(614, "chokuretsu-wrapped-topic-h₂o", 1, TopicType.SUB),
    Topic(615, "chokuretsu-wrapped-topic-calm-and-quick", 1, TopicType.SUB),
    Topic(616, "chokuretsu-wrapped-topic-darkest-under-the-lamp-post", 1, TopicType.SUB),
    Topic(617, "chokuretsu-wrapped-topic-group-action", 1, TopicType.SUB),
    Topic(618, "chokuretsu-wrapped-topic-sos-brigade-homepage", 1, TopicType.SUB),
    Topic(619, "chokuretsu-wrapped-topic-breakthrough", 1, TopicType.SUB),
    Topic(620, "chokuretsu-wrapped-topic-important-things", 1, TopicType.SUB),
    Topic(621, "chokuretsu-wrapped-topic-concern", 1, TopicType.SUB),
    Topic(622, "chokuretsu-wrapped-topic-final-wish", 1, TopicType.SUB),
    Topic(623, "chokuretsu-wrapped-topic-work-delay", 1, TopicType.SUB),
    Topic(624, "chokuretsu-wrapped-topic-a-small-kindness", 1, TopicType.SUB),
    Topic(625, "chokuretsu-wrapped-topic-electric-sheep", 1, TopicType.SUB),
    Topic(626, "chokuretsu-wrapped-topic-time-for-“something”", 1, TopicType.SUB),
    Topic(627, "chokuretsu-wrapped-topic-club-president's-anxiety", 1, TopicType.SUB),
    Topic(628, "chokuretsu-wrapped-topic-omitted-letter-misprint", 1, TopicType.SUB),
    Topic(629, "chokuretsu-wrapped-topic-treatment", 1, TopicType.SUB),
    Topic(630, "chokuretsu-wrapped-topic-going-in-circles", 1, TopicType.SUB),
    Topic(631, "chokuretsu-wrapped-topic-feigning-ignorance", 1, TopicType.SUB),
    Topic(632, "chokuretsu-wrapped-topic-useful-information", 1, TopicType.SUB),
    Topic(633, "chokuretsu-wrapped-topic-open-window", 1, TopicType.SUB),
    Topic(634, "chokuretsu-wrapped-topic-scary-object", 1, TopicType.SUB),
    Topic(635, "chokuretsu-wrapped-topic-ignorance-is-bliss", 1, TopicType.SUB),
    Topic(636, "chokuretsu-wrapped-topic-mysterious-radio-waves", 1, TopicType.SUB),
    Topic(637, "chokuretsu-wrapped-topic-the-power-of-imagination", 1, TopicType.SUB),
    Topic(638, "chokuretsu-wrapped-topic-nail-dirt", 1, TopicType.SUB),
    Topic(639, "chokuretsu-wrapped-topic-answer-sheet", 1, TopicType.SUB),
    Topic(640, "chokuretsu-wrapped-topic-extra-history-lesson", 1, TopicType.SUB),
    Topic(641, "chokuretsu-wrapped-topic-demonic-whispering", 1, TopicType.SUB),
    Topic(642, "chokuretsu-wrapped-topic-very-fast", 1, TopicType.SUB),
    Topic(643, "chokuretsu-wrapped-topic-band-aid", 1, TopicType.SUB),
    Topic(644, "chokuretsu-wrapped-topic-heroine", 1, TopicType.SUB),
    Topic(645, "chokuretsu-wrapped-topic-sos-brigade-activity-log", 1, TopicType.SUB),
    Topic(646, "chokuretsu-wrapped-topic-angel-descent", 1, TopicType.SUB),
    Topic(647, "chokuretsu-wrapped-topic-distance-between-buildings", 1, TopicType.SUB),
    Topic(648, "chokuretsu-wrapped-topic-strategic-retreat", 1, TopicType.SUB),
    Topic(649, "chokuretsu-wrapped-topic-empty-shell", 1, TopicType.SUB),
    Topic(650, "chokuretsu-wrapped-topic-pitiable-computer-society", 1, TopicType.SUB),
    Topic(651, "chokuretsu-wrapped-topic-a-profoundly-wonderful-story", 1, TopicType.SUB),
    Topic(652, "chokuretsu-wrapped-topic-a-matter-of-time", 1, TopicType.SUB),
    Topic(653, "chokuretsu-wrapped-topic-boy's-team", 1, TopicType.SUB),
    Topic(654, "chokuretsu-wrapped-topic-falling-on-your-backside", 1, TopicType.SUB),
    Topic(655, "chokuretsu-wrapped-topic-intricate-workmanship", 1, TopicType.SUB),
    Topic(656, "chokuretsu-wrapped-topic-acceptance-is-also-important", 1, TopicType.SUB),
    Topic(657, "chokuretsu-wrapped-topic-futuristic-ghost-stories", 2, TopicType.SUB),
    Topic(658, "chokuretsu-wrapped-topic-overthinking", 2, TopicType.SUB),
    Topic(659, "chokuretsu-wrapped-topic-the-cursed-music-room", 2, TopicType.SUB),
    Topic(660, "chokuretsu-wrapped-topic-sci-fi-novel", 2, TopicType.SUB),
    Topic(661, "chokuretsu-wrapped-topic-doing-it-yourself", 2, TopicType.SUB),
    Topic(662, "chokuretsu-wrapped-topic-treated-to-juice", 2, TopicType.SUB),
    Topic(663, "chokuretsu-wrapped-topic-silent-observer", 2, TopicType.SUB),
    Topic(664, "chokuretsu-wrapped-topic-the-fate-of-the-world", 2, TopicType.SUB),
    Topic(665, "chokuretsu-wrapped-topic-annoying-situation", 2, TopicType.SUB),
    Topic(666, "chokuretsu-wrapped-topic-danger:-do-not-touch", 2, TopicType.SUB),
    Topic(667, "chokuretsu-wrapped-topic-the-truth-of-the-matter", 2, TopicType.SUB),
    Topic(668, "chokuretsu-wrapped-topic-closing-ceremony", 2, TopicType.SUB),
    Topic(669, "chokuretsu-wrapped-topic-president's-wish", 2, TopicType.SUB),
    Topic(670, "chokuretsu-wrapped-topic-inexplicable-conduct", 2, TopicType.SUB),
    Topic(671, "chokuretsu-wrapped-topic-computer-club-&-sheet-music", 2, TopicType.SUB),
    Topic(672, "chokuretsu-wrapped-topic-suspicious-data", 2, TopicType.SUB),
    Topic(673, "chokuretsu-wrapped-topic-insufficient-data", 2, TopicType.SUB),
    Topic(674, "chokuretsu-wrapped-topic-president's-orders", 2, TopicType.SUB),
    Topic(675, "chokuretsu-wrapped-topic-plasma", 2, TopicType.SUB),
    Topic(676, "chokuretsu-wrapped-topic-pouting", 2, TopicType.SUB),
    Topic(677, "chokuretsu-wrapped-topic-haruhi-the-unwavering", 2, TopicType.SUB),
    Topic(678, "chokuretsu-wrapped-topic-speed-reading-nagato-style", 2, TopicType.SUB),
    Topic(679, "chokuretsu-wrapped-topic-haruhi's-theory", 2, TopicType.SUB),
    Topic(680, "chokuretsu-wrapped-topic-budget-application-form", 2, TopicType.SUB),
    Topic(681, "chokuretsu-wrapped-topic-supplementary-class-schedule", 2, TopicType.SUB),
    Topic(682, "chokuretsu-wrapped-topic-physical-examination-notice", 2, TopicType.SUB),
    Topic(683, "chokuretsu-wrapped-topic-literary-club-band", 2, TopicType.SUB),
    Topic(684, "chokuretsu-wrapped-topic-something-that-passed-by", 2, TopicType.SUB),
    Topic(685, "chokuretsu-wrapped-topic-speak-of-the-devil…", 2, TopicType.SUB),
    Topic(686, "chokuretsu-wrapped-topic-day-of-deadline", 2, TopicType.SUB),
    Topic(687, "chokuretsu-wrapped-topic-beautiful-flower", 2, TopicType.SUB),
    Topic(688, "chokuretsu-wrapped-topic-roadside-flower", 2, TopicType.SUB),
    Topic(689, "chokuretsu-wrapped-topic-bluebird-of-happiness", 2, TopicType.SUB),
    Topic(690, "chokuretsu-wrapped-topic-a-minor-coincidence", 2, TopicType.SUB),
    Topic(691, "chokuretsu-wrapped-topic-deadline", 2, TopicType.SUB),
    Topic(692, "chokuretsu-wrapped-topic-an-award-of-some-sort", 2, TopicType.SUB),
    Topic(693, "chokuretsu-wrapped-topic-chatting-over-tea", 2, TopicType.SUB),
    Topic(694, "chokuretsu-wrapped-topic-premature-jab", 2, TopicType.SUB),
    Topic(695, "chokuretsu-wrapped-topic-club-member's-gratitude", 2, TopicType.SUB),
    Topic(696, "chokuretsu-wrapped-topic-attack-of-the-club-member", 2, TopicType.SUB),
    Topic(697, "chokuretsu-wrapped-topic-something-summery", 3, TopicType.SUB),
    Topic(698, "chokuretsu-wrapped-topic-cheap-sympathy", 3, TopicType.SUB),
    Topic(699, "chokuretsu-wrapped-topic-mikuru's-quip", 3, TopicType.SUB),
    Topic(700, "chokuretsu-wrapped-topic-expensive-receipt", 3, TopicType.SUB),
    Topic(701, "chokuretsu-wrapped-topic-bell", 3, TopicType.SUB),
    Topic(702, "chokuretsu-wrapped-topic-outrageous-ingredients", 3, TopicType.SUB),
    Topic(703, "chokuretsu-wrapped-topic-book-barbecue", 3, TopicType.SUB),
    Topic(704, "chokuretsu-wrapped-topic-feelings-of-guilt", 3, TopicType.SUB),
    Topic(705, "chokuretsu-wrapped-topic-watermelon-seeds", 3, TopicType.SUB),
    Topic(706, "chokuretsu-wrapped-topic-dried-banana", 3, TopicType.SUB),
    Topic(707, "chokuretsu-wrapped-topic-mysterious-ofuda", 3, TopicType.SUB),
    Topic(708, "chokuretsu-wrapped-topic-junk", 3, TopicType.SUB),
    Topic(709, "chokuretsu-wrapped-topic-mysterious-mechanism", 3, TopicType.SUB),
    Topic(710, "chokuretsu-wrapped-topic-fruit-king", 3, TopicType.SUB),
    Topic(711, "chokuretsu-wrapped-topic-moon-viewing-banquet", 3, TopicType.SUB),
    Topic(712, "chokuretsu-wrapped-topic-summer-breeze-cd", 3, TopicType.SUB),
    Topic(713, "chokuretsu-wrapped-topic-seven-spotted-ladybug", 3, TopicType.SUB),
    Topic(714, "chokuretsu-wrapped-topic-meter-long-iron-skewer", 3, TopicType.SUB),
    Topic(715, "chokuretsu-wrapped-topic-artificial-feeding", 3, TopicType.SUB),
    Topic(716, "chokuretsu-wrapped-topic-junk-storage", 3, TopicType.SUB),
    Topic(717, "chokuretsu-wrapped-topic-kyon's-deduction", 3, TopicType.SUB),
    Topic(718, "chokuretsu-wrapped-topic-little-sister's-helping-hand", 3, TopicType.SUB),
    Topic(719, "chokuretsu-wrapped-topic-lucky-item", 3, TopicType.SUB),
    Topic(720, "chokuretsu-wrapped-topic-in-the-palm-of-your-hand", 3, TopicType.SUB),
    Topic(721, "chokuretsu-wrapped-topic-medal-of-honor", 3, TopicType.SUB),
    Topic(722, "chokuretsu-wrapped-topic-target", 3, TopicType.SUB),
    Topic(723, "chokuretsu-wrapped-topic-poltergeist", 3, TopicType.SUB),
    Topic(724, "chokuretsu-wrapped-topic-mosquito-coil", 3, TopicType.SUB),
    Topic(725, "chokuretsu-wrapped-topic-running-away", 3, TopicType.SUB),
    Topic(726, "chokuretsu-wrapped-topic-ray-gun", 3, TopicType.SUB),
    Topic(727, "chokuretsu-wrapped-topic-pocket-paperback", 3, TopicType.SUB),
    Topic(728, "chokuretsu-wrapped-topic-seal-of-approval", 3, TopicType.SUB),
    Topic(729, "chokuretsu-wrapped-topic-sometime", 3, TopicType.SUB),
    Topic(730, "chokuretsu-wrapped-topic-ghost", 3, TopicType.SUB),
    Topic(731, "chokuretsu-wrapped-topic-enthusiasm", 3, TopicType.SUB),
    Topic(732, "chokuretsu-wrapped-topic-secondary-disaster", 3, TopicType.SUB),
    Topic(733, "chokuretsu-wrapped-topic-resonance", 3, TopicType.SUB),
    Topic(734, "chokuretsu-wrapped-topic-chlorine", 4, TopicType.SUB),
    Topic(735, "chokuretsu-wrapped-topic-spirit-of-service", 4, TopicType.SUB),
    Topic(736, "chokuretsu-wrapped-topic-surprisingly-good-person", 4, TopicType.SUB),
    Topic(737, "chokuretsu-wrapped-topic-ventra-badge", 4, TopicType.SUB),
    Topic(738, "chokuretsu-wrapped-topic-marble", 4, TopicType.SUB),
    Topic(739, "chokuretsu-wrapped-topic-ordinary", 4, TopicType.SUB),
    Topic(740, "chokuretsu-wrapped-topic-being-diplomatic", 4, TopicType.SUB),
    Topic(741, "chokuretsu-wrapped-topic-good-fortune", 4, TopicType.SUB),
    Topic(742, "chokuretsu-wrapped-topic-emergency", 4, TopicType.SUB),
    Topic(743, "chokuretsu-wrapped-topic-air-freshener", 4, TopicType.SUB),
    Topic(744, "chokuretsu-wrapped-topic-fluorescent-panel", 4, TopicType.SUB),
    Topic(745, "chokuretsu-wrapped-topic-wet-cloth", 4, TopicType.SUB),
    Topic(746, "chokuretsu-wrapped-topic-bucket-sound", 4, TopicType.SUB),
    Topic(747, "chokuretsu-wrapped-topic-weekly-magazine", 4, TopicType.SUB),
    Topic(748, "chokuretsu-wrapped-topic-baseball-equipment", 4, TopicType.SUB),
    Topic(749, "chokuretsu-wrapped-topic-warabimochi", 4, TopicType.SUB),
    Topic(750, "chokuretsu-wrapped-topic-glowstick", 4, TopicType.SUB),
    Topic(751, "chokuretsu-wrapped-topic-manga-magazine", 4, TopicType.SUB),
    Topic(752, "chokuretsu-wrapped-topic-astrology-book", 4, TopicType.SUB),
    Topic(753, "chokuretsu-wrapped-topic-object-of-interest", 4, TopicType.SUB),
    Topic(754, "chokuretsu-wrapped-topic-budget-constraints", 4, TopicType.SUB),
    Topic(755, "chokuretsu-wrapped-topic-tabletop-game", 4, TopicType.SUB),
    Topic(756, "chokuretsu-wrapped-topic-standoff-surrender", 4, TopicType.SUB),
    Topic(757, "chokuretsu-wrapped-topic-clubroom-furnishing", 4, TopicType.SUB),
    Topic(758, "chokuretsu-wrapped-topic-shopping-squad", 4, TopicType.SUB),
    Topic(759, "chokuretsu-wrapped-topic-adenosine-receptors", 4, TopicType.SUB),
    Topic(760, "chokuretsu-wrapped-topic-unwarranted-spite", 4, TopicType.SUB),
    Topic(761, "chokuretsu-wrapped-topic-deliberate", 4, TopicType.SUB),
    Topic(762, "chokuretsu-wrapped-topic-the-idol-of-north-high", 4, TopicType.SUB),
    Topic(763, "chokuretsu-wrapped-topic-yellow-card", 4, TopicType.SUB),
    Topic(764, "chokuretsu-wrapped-topic-talking-privately", 4, TopicType.SUB),
    Topic(765, "chokuretsu-wrapped-topic-the-next-test-of-courage", 4, TopicType.SUB),
    Topic(766, "chokuretsu-wrapped-topic-time-limit", 4, TopicType.SUB),
    Topic(767, "chokuretsu-wrapped-topic-scarab-beetle", 4, TopicType.SUB),
    Topic(768, "chokuretsu-wrapped-topic-knees", 4, TopicType.SUB),
    Topic(769, "chokuretsu-wrapped-topic-unfortunate-circumstance", 4, TopicType.SUB),
    Topic(770, "chokuretsu-wrapped-topic-break-time", 4, TopicType.SUB),
    Topic(771, "chokuretsu-wrapped-topic-eloquence", 4, TopicType.SUB),
    Topic(772, "chokuretsu-wrapped-topic-coward", 4, TopicType.SUB),
    Topic(773, "chokuretsu-wrapped-topic-fun-test-of-courage", 4, TopicType.SUB),
    Topic(774, "chokuretsu-wrapped-topic-drone-beetle", 4, TopicType.SUB),
    Topic(775, "chokuretsu-wrapped-topic-hallway-echo", 4, TopicType.SUB),
    Topic(776, "chokuretsu-wrapped-topic-ghost?", 4, TopicType.SUB),
    Topic(777, "chokuretsu-wrapped-topic-sunflower-seeds", 4, TopicType.SUB),
    Topic(778, "chokuretsu-wrapped-topic-retribution", 4, TopicType.SUB),
    Topic(779, "chokuretsu-wrapped-topic-ordinary-human", 4, TopicType.SUB),
    Topic(780, "chokuretsu-wrapped-topic-computer-society-romanticism", 4, TopicType.SUB),
    Topic(781, "chokuretsu-wrapped-topic-trembling-with-fear", 4, TopicType.SUB),
    Topic(782, "chokuretsu-wrapped-topic-flower-seed", 4, TopicType.SUB),
    Topic(783, "chokuretsu-wrapped-topic-parasitism", 4, TopicType.SUB),
    Topic(784, "chokuretsu-wrapped-topic-indoor-shoes", 4, TopicType.SUB),
    Topic(785, "chokuretsu-wrapped-topic-notebook-paper-scrap", 4, TopicType.SUB),
    Topic(786, "chokuretsu-wrapped-topic-apology", 4, TopicType.SUB),
    Topic(787, "chokuretsu-wrapped-topic-punishment", 4, TopicType.SUB),
    Topic(788, "chokuretsu-wrapped-topic-intuition", 4, TopicType.SUB),
    Topic(789, "chokuretsu-wrapped-topic-photo-of-taniguchi", 4, TopicType.SUB),
    Topic(790, "chokuretsu-wrapped-topic-personal-relationship", 4, TopicType.SUB),
    Topic(791, "chokuretsu-wrapped-topic-hose", 4, TopicType.SUB),
    Topic(792, "chokuretsu-wrapped-topic-the-taste-of-victory", 5, TopicType.SUB),
    Topic(793, "chokuretsu-wrapped-topic-handmade-pieces", 5, TopicType.SUB),
    Topic(794, "chokuretsu-wrapped-topic-reliable-friend", 5, TopicType.SUB),
    Topic(795, "chokuretsu-wrapped-topic-special-chess-training", 5, TopicType.SUB),
    Topic(796, "chokuretsu-wrapped-topic-kyon-goes-first", 5, TopicType.SUB),
    Topic(797, "chokuretsu-wrapped-topic-three-heads-are-better-than-one", 5, TopicType.SUB),
    Topic(798, "chokuretsu-wrapped-topic-one-to-one", 5, TopicType.SUB),
    Topic(799, "chokuretsu-wrapped-topic-sos-brigade-chess-champion", 5, TopicType.SUB),
    Topic(800, "chokuretsu-wrapped-topic-kyon's-doubts", 5, TopicType.SUB),
    Topic(801, "chokuretsu-wrapped-topic-chewing-gum-strip", 5, TopicType.SUB),
    Topic(802, "chokuretsu-wrapped-topic-useless", 5, TopicType.SUB),
    Topic(803, "chokuretsu-wrapped-topic-indecipherable", 5, TopicType.SUB),
    Topic(804, "chokuretsu-wrapped-topic-mysterious-address", 5, TopicType.SUB),
    Topic(805, "chokuretsu-wrapped-topic-impromptu-decision", 5, TopicType.SUB),
    Topic(806, "chokuretsu-wrapped-topic-numb-legs", 5, TopicType.SUB),
    Topic(807, "chokuretsu-wrapped-topic-tarpaulin", 5, TopicType.SUB),
    Topic(808, "chokuretsu-wrapped-topic-bold-opinion", 5, TopicType.SUB),
    Topic(809, "chokuretsu-wrapped-topic-girls'-accessories", 5, TopicType.SUB),
    Topic(810, "chokuretsu-wrapped-topic-stray-bullet", 5, TopicType.SUB),
    Topic(811, "chokuretsu-wrapped-topic-standing-firm", 5, TopicType.SUB),
    Topic(812, "chokuretsu-wrapped-topic-misguided-ideas", 5, TopicType.SUB),
    Topic(813, "chokuretsu-wrapped-topic-give-up", 5, TopicType.SUB),
    Topic(814, "chokuretsu-wrapped-topic-consideration", 5, TopicType.SUB),
    Topic(815, "chokuretsu-wrapped-topic-safety-first", 5, TopicType.SUB),
    Topic(816, "chokuretsu-wrapped-topic-piercing-scream", 5, TopicType.SUB),
    Topic(817, "chokuretsu-wrapped-topic-withered-silver-grass", 5, TopicType.SUB),
    Topic(818, "chokuretsu-wrapped-topic-making-it-consistent", 5, TopicType.SUB),
    Topic(819, "chokuretsu-wrapped-topic-substitute", 5, TopicType.SUB),
    Topic(820, "chokuretsu-wrapped-topic-a-place-that-doesn't-exist", 5, TopicType.SUB),
)

TOPIC_BY_FLAG: dict[int, Topic] = {topic.flag: topic for topic in TOPICS}


def topic_by_flag(flag: int) -> Topic | None:
    return TOPIC_BY_FLAG.get(int(flag))


def topics_for_episode(episode: int) -> list[Topic]:
    return [topic for topic in TOPICS if topic.episode == int(episode)]
