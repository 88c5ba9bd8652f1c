"""Case-insensitive substring filter over the regulation table."""

from dataclasses import replace

from guide.content import RegulationItem, RegulationSection


def item_matches(item: RegulationItem, term: str) -> bool:
    """Check whether any searchable field of an item contains term.

    Args:
        item: The regulation entry.
        term: Already lower-cased search term.
    """
    fields = [item.title, item.search_text]
    if item.legal_reference:
        fields.append(item.legal_reference)
    if item.fine_amount:
        fields.append(item.fine_amount)
    return any(term in value.lower() for value in fields)


def filter_sections(
    sections: tuple[RegulationSection, ...] | list[RegulationSection],
    query: str,
) -> list[RegulationSection]:
    """Filter sections down to the items matching query.

    Sections with no matching item are dropped. Section and item order is
    preserved. An empty query returns every section unchanged.

    Args:
        sections: Regulation sections to search.
        query: Raw search box content (not trimmed).

    Returns:
        Matching sections, each holding only its matching items.
    """
    term = query.lower()

    result = []
    for section in sections:
        items = tuple(item for item in section.items if item_matches(item, term))
        if items:
            result.append(replace(section, items=items))
    return result
