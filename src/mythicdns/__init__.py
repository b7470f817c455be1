"""mythicdns - Mythic Beasts DNS provider for ACME DNS-01 challenges."""

from mythicdns.providers.mythicbeasts import MythicBeastsProvider

__all__ = ["MythicBeastsProvider"]
__version__ = "0.1.0"
