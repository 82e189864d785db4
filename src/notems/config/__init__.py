"""note.ms client configuration package."""

from notems.config.loader import get_config, load_config
from notems.config.models import ClientSettings, ContentSelector

__all__ = ["ClientSettings", "ContentSelector", "get_config", "load_config"]
