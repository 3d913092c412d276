"""Channel bank dictionary and alias matching."""

from .models import ChannelBankItem, ChannelNotFoundError, InvalidChannelError
from .defaults import DEFAULT_CHANNELS, default_channels
from .bank import ChannelBank, parse_aliases
from .matcher import match_header, normalize

__all__ = [
    "ChannelBankItem",
    "ChannelNotFoundError",
    "InvalidChannelError",
    "DEFAULT_CHANNELS",
    "default_channels",
    "ChannelBank",
    "parse_aliases",
    "match_header",
    "normalize",
]
