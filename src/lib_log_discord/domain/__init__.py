"""Domain value objects used by the Discord sink."""

from __future__ import annotations

from .errors import ConfigurationError, DeliveryError, DiscordTransportError
from .levels import EMBED_COLORS, NEUTRAL_COLOR, SeverityLevel, color_for
from .message import LogMessage
from .payload import DeliveryReceipt, Embed, EmbedField, SenderIdentity, WebhookPayload
from .threshold import LevelCell

__all__ = [
    "ConfigurationError",
    "DeliveryError",
    "DeliveryReceipt",
    "DiscordTransportError",
    "EMBED_COLORS",
    "Embed",
    "EmbedField",
    "LevelCell",
    "LogMessage",
    "NEUTRAL_COLOR",
    "SenderIdentity",
    "SeverityLevel",
    "WebhookPayload",
    "color_for",
]
