"""Default channel bank dictionary."""

from .models import ChannelBankItem

DEFAULT_CHANNELS: list[ChannelBankItem] = [
    ChannelBankItem(
        id="1",
        standard_name="WOB",
        aliases=["wob", "weight on bit", "bit weight", "weight_on_bit"],
    ),
    ChannelBankItem(
        id="2",
        standard_name="RPM",
        aliases=["rpm", "rotary speed", "rotation speed", "rotary_speed"],
    ),
    ChannelBankItem(
        id="3",
        standard_name="DEPTH",
        aliases=["depth", "measured depth", "md", "measured_depth"],
    ),
    ChannelBankItem(
        id="4",
        standard_name="HOOKLOAD",
        aliases=["hookload", "hook load", "hook_load", "hkld"],
    ),
    ChannelBankItem(
        id="5",
        standard_name="TORQUE",
        aliases=["torque", "tor", "surface torque", "surf_torque"],
    ),
]


def default_channels() -> list[ChannelBankItem]:
    """Return a fresh copy of the default dictionary."""
    return [item.model_copy(deep=True) for item in DEFAULT_CHANNELS]
