"""Static similarity profile loader. Read-only; no business logic."""

import json
from pathlib import Path
from typing import Any

from similarity_service.config.settings import Settings
from similarity_service.config.similarity.models import SimilarityProfile

_config_dir = Path(__file__).resolve().parent
_config_path = _config_dir / "static.json"

_cached: dict[str, SimilarityProfile] | None = None
_active_profile: str | None = None


def _load_raw_data() -> dict[str, Any]:
    """Load raw JSON; used to read both profiles and active."""
    raw = _config_path.read_text(encoding="utf-8")
    return json.loads(raw)


def load_similarity_profiles() -> dict[str, SimilarityProfile]:
    """Load similarity profiles from static.json. Keys are profile names."""
    global _cached
    if _cached is not None:
        return _cached
    profiles = _load_raw_data().get("profiles", {})
    _cached = {k: SimilarityProfile.model_validate(v) for k, v in profiles.items()}
    return _cached


def get_similarity_profile(profile_name: str) -> SimilarityProfile | None:
    """Return the profile with the given name, or None if missing."""
    return load_similarity_profiles().get(profile_name)


def get_active_profile_name() -> str:
    """Return the profile name marked as active in static.json. Defaults to 'default' if missing."""
    global _active_profile
    if _active_profile is not None:
        return _active_profile
    _active_profile = _load_raw_data().get("active", "default")
    return _active_profile


def load_settings_file(path: str | Path) -> dict[str, Any]:
    """Read index settings from a JSON file. Raises ValueError if the file is not a JSON object."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Index settings file {str(path)!r} must contain a JSON object")
    return data


def resolve_index_settings(
    profile_name: str | None,
    inline_settings: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """
    Resolve the index settings to build similarities from.
    If inline_settings is provided (even empty), it is used as is.
    If profile_name is None or "active", use the profile marked as active in static.json.
    Otherwise load by profile_name. Raises ValueError if the profile is missing.
    """
    if inline_settings is not None:
        return inline_settings
    name = get_active_profile_name() if profile_name in (None, "active") else profile_name
    profile = get_similarity_profile(name)
    if profile is None:
        raise ValueError(f"Unknown similarity profile: {name!r}")
    return profile.settings


def load_configured_index_settings(settings: Settings) -> dict[str, Any]:
    """Index settings the service starts with: the settings file when configured, else the profile."""
    if settings.similarity_settings_file:
        return load_settings_file(settings.similarity_settings_file)
    return resolve_index_settings(settings.similarity_profile)
