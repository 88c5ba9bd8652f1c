"""
Prague Visitors Guide content and regulation search.
"""

from guide.content import (
    CHAPTERS,
    EMERGENCY_NUMBERS,
    LEGAL_BASIS,
    REGULATIONS,
    GuideChapter,
    GuideEntry,
    ItemKind,
    RegulationItem,
    RegulationSection,
)
from guide.search import filter_sections, item_matches

__all__ = [
    "CHAPTERS",
    "EMERGENCY_NUMBERS",
    "LEGAL_BASIS",
    "REGULATIONS",
    "GuideChapter",
    "GuideEntry",
    "ItemKind",
    "RegulationItem",
    "RegulationSection",
    "filter_sections",
    "item_matches",
]
