"""DNS providers for ACME challenge validation."""

from mythicdns.providers.base import ChallengeProvider
from mythicdns.providers.mythicbeasts import MythicBeastsProvider

__all__ = ["ChallengeProvider", "MythicBeastsProvider"]
