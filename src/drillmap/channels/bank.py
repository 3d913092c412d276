"""In-memory channel bank with create/edit/delete and search."""

import logging
import uuid
from typing import Callable, Optional

from .defaults import default_channels
from .models import ChannelBankItem, ChannelNotFoundError, InvalidChannelError

logger = logging.getLogger(__name__)

ChannelBankCallback = Callable[[list[ChannelBankItem]], None]


def parse_aliases(text: str) -> list[str]:
    """Split a comma-separated alias string, trimming tokens and dropping empties."""
    return [alias.strip() for alias in text.split(",") if alias.strip()]


class ChannelBank:
    """
    Ordered dictionary of standard channel names and their aliases.

    Every successful mutation notifies subscribers with the full updated
    list. Edits replace the whole record; there is no partial update.
    """

    def __init__(self, channels: Optional[list[ChannelBankItem]] = None):
        self._channels: list[ChannelBankItem] = (
            list(channels) if channels is not None else default_channels()
        )
        self._callbacks: list[ChannelBankCallback] = []

    def __len__(self) -> int:
        return len(self._channels)

    def __iter__(self):
        return iter(list(self._channels))

    def subscribe(self, callback: ChannelBankCallback):
        """Register a callback invoked with the full list after each change."""
        self._callbacks.append(callback)

    def _notify(self):
        snapshot = self.items()
        for callback in self._callbacks:
            callback(snapshot)

    def items(self) -> list[ChannelBankItem]:
        """Return a copy of the channel list in bank order."""
        return list(self._channels)

    def get(self, channel_id: str) -> ChannelBankItem:
        for channel in self._channels:
            if channel.id == channel_id:
                return channel
        raise ChannelNotFoundError(f"Channel '{channel_id}' not found")

    def standard_names(self) -> list[str]:
        """Unique standard names in first-seen order."""
        return list(dict.fromkeys(channel.standard_name for channel in self._channels))

    def search(self, term: str = "") -> list[ChannelBankItem]:
        """Filter channels by case-insensitive substring on name or alias."""
        if not term:
            return self.items()
        return [channel for channel in self._channels if channel.matches_search(term)]

    def add(self, standard_name: str, aliases: str = "") -> ChannelBankItem:
        """
        Add a new channel at the end of the bank.

        Args:
            standard_name: The standard channel name (must not be blank)
            aliases: Comma-separated aliases

        Returns:
            The created ChannelBankItem

        Raises:
            InvalidChannelError: If the standard name is blank
        """
        name = standard_name.strip()
        if not name:
            raise InvalidChannelError("Standard channel name is required")

        channel = ChannelBankItem(
            id=str(uuid.uuid4()),
            standard_name=name,
            aliases=parse_aliases(aliases),
        )
        self._channels.append(channel)
        logger.info(f"Added channel {channel.standard_name} ({len(channel.aliases)} aliases)")
        self._notify()
        return channel

    def edit(self, channel_id: str, standard_name: str, aliases: str = "") -> ChannelBankItem:
        """
        Replace the name and aliases of an existing channel in place.

        Raises:
            ChannelNotFoundError: If no channel has this id
            InvalidChannelError: If the standard name is blank
        """
        name = standard_name.strip()
        if not name:
            raise InvalidChannelError("Standard channel name is required")

        for index, channel in enumerate(self._channels):
            if channel.id == channel_id:
                updated = ChannelBankItem(
                    id=channel_id,
                    standard_name=name,
                    aliases=parse_aliases(aliases),
                )
                self._channels[index] = updated
                logger.info(f"Updated channel {channel_id}: {channel.standard_name} -> {name}")
                self._notify()
                return updated

        raise ChannelNotFoundError(f"Channel '{channel_id}' not found")

    def delete(self, channel_id: str) -> ChannelBankItem:
        """
        Remove a channel by id, leaving the others in order.

        Raises:
            ChannelNotFoundError: If no channel has this id
        """
        for index, channel in enumerate(self._channels):
            if channel.id == channel_id:
                del self._channels[index]
                logger.info(f"Deleted channel {channel.standard_name} ({channel_id})")
                self._notify()
                return channel

        raise ChannelNotFoundError(f"Channel '{channel_id}' not found")

    def reset(self):
        """Restore the default dictionary."""
        self._channels = default_channels()
        logger.info("Channel bank reset to defaults")
        self._notify()
