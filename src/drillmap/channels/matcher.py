"""Alias-based matching of file headers to standard channel names."""

from typing import Iterable

from .models import ChannelBankItem


def normalize(text: str) -> str:
    """Trim and lower-case a header or alias for comparison."""
    return text.strip().lower()


def match_header(header: str, bank: Iterable[ChannelBankItem]) -> str:
    """
    Find the standard channel name for a header.

    The first bank item (in bank order) with an alias equal to the header,
    ignoring case and surrounding whitespace, wins. There is no scoring or
    fuzzy matching.

    Returns:
        The matched standard name, or "" when no alias matches
    """
    key = normalize(header)
    for item in bank:
        if any(normalize(alias) == key for alias in item.aliases):
            return item.standard_name
    return ""
