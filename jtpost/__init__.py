"""Post lifecycle management for Telegram channels: models, slugs, service, rendering and logging."""

__version__ = "0.1.0"