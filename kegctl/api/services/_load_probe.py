"""Build the platform probe from configuration."""

from ..config.KegConfig import KegConfig
from .detect_probe import detect_probe
from .PlatformProbe import PlatformProbe


def _load_probe() -> PlatformProbe:
    """Load configuration and return the probe for the running OS."""
    config = KegConfig.load()
    return detect_probe(process_query_timeout=config.services.process_query_timeout)
