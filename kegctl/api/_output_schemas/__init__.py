"""Output schemas for API commands - importing a domain module registers its schemas."""

from . import services, tap, uses

__all__ = ["services", "tap", "uses"]
