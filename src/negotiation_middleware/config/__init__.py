"""Configuration for negotiation middleware."""

from .settings import NegotiationSettings, load_settings

__all__ = ["NegotiationSettings", "load_settings"]
