"""Read service settings (base URL, headers, form field, page marker) from JSON.

Every NoteClient built without explicit settings goes through here, so
parsed files are memoized by resolved path for the life of the process.
Any problem with a file surfaces as ConfigurationError.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from notems.config.models import ClientSettings
from notems.domain.errors import ConfigurationError

# Resolved file path -> parsed settings
_config_cache: dict[str, ClientSettings] = {}

# Shipped inside the package, pointing at https://note.ms
_DEFAULT_CONFIG_PATH = Path(__file__).parent / "notems_default.json"


def load_config(path: Optional[Union[str, Path]] = None) -> ClientSettings:
    """Parse a settings file into ``ClientSettings``.

    Keys missing from the file keep their model defaults, so a file
    holding only ``base_url`` is enough to point the client at a mirror.

    Parameters
    ----------
    path : str | Path | None
        Settings file to read; ``None`` means the bundled
        ``notems_default.json``.

    Returns
    -------
    ClientSettings
        Settings shared by every client built from this file.

    Raises
    ------
    ConfigurationError
        If the file does not exist, is not valid JSON, or does not match
        the expected schema.
    """
    config_path = Path(path) if path else _DEFAULT_CONFIG_PATH
    cache_key = str(config_path.resolve())

    if cache_key in _config_cache:
        return _config_cache[cache_key]

    if not config_path.exists():
        raise ConfigurationError(f"Config file not found: {config_path}")

    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
        config = ClientSettings.model_validate(raw)
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Config file is not valid JSON: {config_path}: {exc}") from exc
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid config in {config_path}: {exc}") from exc

    _config_cache[cache_key] = config
    return config


def get_config() -> ClientSettings:
    """Settings for the public note.ms service."""
    return load_config()


def clear_cache() -> None:
    """Forget parsed files so edits on disk are picked up again."""
    _config_cache.clear()
