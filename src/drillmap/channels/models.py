"""Data models for the channel bank dictionary."""

from pydantic import BaseModel, Field


class ChannelBankItem(BaseModel):
    """A standard channel name and the aliases that normalize to it."""

    id: str
    standard_name: str
    aliases: list[str] = Field(default_factory=list)

    def matches_search(self, term: str) -> bool:
        """Case-insensitive substring match against the name or any alias."""
        needle = term.lower()
        if needle in self.standard_name.lower():
            return True
        return any(needle in alias.lower() for alias in self.aliases)


class ChannelNotFoundError(Exception):
    """Exception raised when a channel id is not in the bank."""

    pass


class InvalidChannelError(Exception):
    """Exception raised when a channel entry cannot be committed."""

    pass
