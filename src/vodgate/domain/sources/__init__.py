"""Source registry domain."""

from vodgate.domain.sources.value_objects import Source

__all__ = ["Source"]
