"""Runtime configuration for isospan."""

from isospan.config.logging import configure_logging

__all__ = ["configure_logging"]
