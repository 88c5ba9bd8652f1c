"""
Static content of the Prague Visitors Guide.

The regulation table is searchable (see guide.search); the remaining
chapters and footer facts are read-only reference text served as-is.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType


class ItemKind(str, Enum):
    """Severity of a regulation entry."""

    FINE = "fine"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class RegulationItem:
    """A single regulation, fine or warning entry."""

    kind: ItemKind
    title: str
    body: str  # HTML fragment, may contain <strong>
    search_text: str  # Plain-text mirror of body, used for matching
    fine_amount: str | None = None
    legal_reference: str | None = None


@dataclass(frozen=True)
class RegulationSection:
    """A named group of related regulation entries."""

    id: str
    title: str
    items: tuple[RegulationItem, ...]


# =============================================================================
# Infractions and Penalties
# =============================================================================

PUBLIC_ORDER_LAW = "Law No. 251/2016 Sb."

REGULATIONS: tuple[RegulationSection, ...] = (
    RegulationSection(
        id="2.1",
        title="2.1 Public Order and Quiet",
        items=(
            RegulationItem(
                kind=ItemKind.FINE,
                title="Night Quiet",
                fine_amount="10,000 CZK",
                body=(
                    "Strict quiet hours are enforced between <strong>22:00 and 06:00</strong>. "
                    "Loud noise, music, or shouting in residential areas is prohibited."
                ),
                search_text=(
                    "Strict quiet hours are enforced between 22:00 and 06:00. "
                    "Loud noise, music, or shouting in residential areas is prohibited."
                ),
                legal_reference=PUBLIC_ORDER_LAW,
            ),
            RegulationItem(
                kind=ItemKind.WARNING,
                title="Public Indecency",
                body=(
                    "Inappropriate behavior, public nudity, or urination in public spaces "
                    "is strictly penalized."
                ),
                search_text=(
                    "Inappropriate behavior, public nudity, or urination in public spaces "
                    "is strictly penalized."
                ),
                legal_reference=PUBLIC_ORDER_LAW,
            ),
        ),
    ),
    RegulationSection(
        id="2.2",
        title="2.2 Protecting City Cleanliness",
        items=(
            RegulationItem(
                kind=ItemKind.FINE,
                title="Property Damage",
                fine_amount="50,000 CZK",
                body=(
                    "Damaging public property, monuments, or green spaces is a serious offense. "
                    "<strong>Graffiti</strong> is only allowed in specific designated legal zones."
                ),
                search_text=(
                    "Damaging public property, monuments, or green spaces is a serious offense. "
                    "Graffiti is only allowed in specific designated legal zones."
                ),
            ),
            RegulationItem(
                kind=ItemKind.FINE,
                title="Littering",
                fine_amount="20,000 CZK",
                body=(
                    "Includes throwing cigarette butts, gum, or waste on the ground. "
                    "<strong>Throwing objects from vehicles</strong> is also strictly prohibited."
                ),
                search_text=(
                    "Includes throwing cigarette butts, gum, or waste on the ground. "
                    "Throwing objects from vehicles is also strictly prohibited."
                ),
            ),
            RegulationItem(
                kind=ItemKind.FINE,
                title="Feeding Animals",
                fine_amount="1,000 CZK",
                body=(
                    "Do not feed pigeons, swans, or nutria (river rats). "
                    "It harms the ecosystem and attracts pests."
                ),
                search_text=(
                    "Do not feed pigeons, swans, or nutria (river rats). "
                    "It harms the ecosystem and attracts pests."
                ),
            ),
        ),
    ),
)


# =============================================================================
# Other guide chapters
# =============================================================================


@dataclass(frozen=True)
class GuideEntry:
    """A heading with a short explanatory paragraph."""

    heading: str
    text: str
    highlight: str | None = None  # e.g. a badge like "50 CZK / day"


@dataclass(frozen=True)
class GuideChapter:
    """A numbered chapter of the guide."""

    number: int
    title: str
    entries: tuple[GuideEntry, ...] = field(default_factory=tuple)
    searchable: bool = False  # True for the chapter backed by REGULATIONS


CHAPTERS: tuple[GuideChapter, ...] = (
    GuideChapter(
        number=1,
        title="Alcohol Consumption Restriction Zones",
        entries=(
            GuideEntry(
                heading="Interactive Map of Restricted Zones",
                text=(
                    "Reserved for the map of areas where public drinking is "
                    "prohibited by local ordinance."
                ),
            ),
        ),
    ),
    GuideChapter(
        number=2,
        title="Infractions and Penalties (Avoid Fines!)",
        searchable=True,
    ),
    GuideChapter(
        number=3,
        title="Drinking Water",
        entries=(
            GuideEntry(
                heading="Public Drinking Fountains",
                text=(
                    "Available mostly from April 1st to October 31st. Look for fountains "
                    'marked with the "Pitná voda" (Drinking Water) pictogram.'
                ),
            ),
            GuideEntry(
                heading="Do Not Drink from Decorative Fountains",
                text=(
                    "Water in ornamental fountains, cascades, and mists is generally "
                    "not potable and is treated chemically."
                ),
            ),
        ),
    ),
    GuideChapter(
        number=4,
        title="Traffic Rules",
        entries=(
            GuideEntry(
                heading="Zero Tolerance",
                text="0.0% Blood Alcohol Content limit for cyclists and scooter riders.",
            ),
            GuideEntry(
                heading="Sidewalks",
                text="Riding bikes or electric scooters on sidewalks is prohibited.",
            ),
            GuideEntry(
                heading="Single File",
                text="Cyclists must ride one behind another, not side-by-side.",
            ),
            GuideEntry(
                heading="Yielding",
                text="Riders must always yield to pedestrians, especially on shared paths.",
            ),
        ),
    ),
    GuideChapter(
        number=5,
        title="Controlled Substances and Gambling",
        entries=(
            GuideEntry(
                heading="Cannabis is Illegal",
                text=(
                    "Possession and distribution of recreational cannabis containing THC "
                    "(>1%) is illegal in the Czech Republic."
                ),
            ),
            GuideEntry(
                heading="Psycho-modulating Substances (e.g., HHC, Kratom)",
                text=(
                    "Sale strictly prohibited to persons under 18 years of age. Products "
                    "must carry mandatory labeling. Regulations change frequently; "
                    "caution is advised."
                ),
            ),
            GuideEntry(
                heading="Gambling",
                text=(
                    "Gambling is strictly regulated. Entry to casinos and gaming halls is "
                    "allowed only for persons 18+. Many districts in Prague have banned "
                    "slot machines and technical games entirely to reduce nuisance."
                ),
            ),
        ),
    ),
    GuideChapter(
        number=6,
        title="Fees (City Tax)",
        entries=(
            GuideEntry(
                heading="Local Stay Fee (Tourist Tax)",
                highlight="50 CZK / day",
                text=(
                    "Collected by accommodation providers (hotels, hostels, AirBnb). The "
                    "revenue supports city infrastructure, waste management, and tourism "
                    "services. Payment is mandatory for every day of stay (max 60 days)."
                ),
            ),
            GuideEntry(
                heading="Exemptions",
                text=(
                    "Persons under 18 years of age. Holders of ZTP/P cards (severe "
                    "disability) and their guides."
                ),
            ),
        ),
    ),
    GuideChapter(
        number=7,
        title="Fireworks and Pyrotechnics",
        entries=(
            GuideEntry(
                heading="Strictly Regulated",
                text=(
                    "Amateur use of pyrotechnics is banned throughout most of the year to "
                    "protect historical buildings and wildlife (especially swans)."
                ),
            ),
            GuideEntry(
                heading="When is it allowed?",
                highlight="10:00 – 22:00",
                text=(
                    "Only on January 1st and December 31st. Exceptions apply for official "
                    "public holidays or permitted events."
                ),
            ),
            GuideEntry(
                heading="Permanent Prohibited Zones",
                text=(
                    "Historical City Core (Heritage conservation areas). Within 250 meters "
                    "of hospitals, nursing homes, and veterinary clinics. Parks, nature "
                    "reserves, and near waterways (rivers/dams)."
                ),
            ),
        ),
    ),
)


# =============================================================================
# Footer
# =============================================================================

LEGAL_BASIS = f"Information is based on local ordinances including {PUBLIC_ORDER_LAW}"

EMERGENCY_NUMBERS = MappingProxyType(
    {
        "General": "112",
        "Police": "158",
        "Ambulance": "155",
        "Fire": "150",
    }
)
