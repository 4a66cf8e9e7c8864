import json

import pytest

from similarity_service.config.settings import Settings
from similarity_service.config.similarity.static import (
    get_active_profile_name,
    get_similarity_profile,
    load_configured_index_settings,
    load_settings_file,
    load_similarity_profiles,
    resolve_index_settings,
)


def test_profiles_are_loaded() -> None:
    profiles = load_similarity_profiles()
    assert {"default", "bm25_short_fields", "probabilistic"} <= set(profiles)
    assert get_similarity_profile("missing") is None
    assert get_active_profile_name() == "default"


def test_every_profile_builds(lookup_for) -> None:
    for name, profile in load_similarity_profiles().items():
        lookup = lookup_for(profile.settings)
        assert "default" in lookup, name


def test_resolve_active_profile() -> None:
    assert resolve_index_settings(None) == {}
    assert resolve_index_settings("active") == {}


def test_resolve_named_profile() -> None:
    settings = resolve_index_settings("bm25_short_fields")
    assert settings["index"]["similarity"]["short_text"]["b"] == 0.3


def test_unknown_profile_is_a_value_error() -> None:
    with pytest.raises(ValueError, match="missing"):
        resolve_index_settings("missing")


def test_inline_settings_win_over_profile() -> None:
    inline = {"index.similarity.s.type": "BM25"}
    assert resolve_index_settings("missing", inline) is inline


def test_load_settings_file(tmp_path) -> None:
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"index.similarity.s.type": "LMDirichlet"}), encoding="utf-8")
    assert load_settings_file(path) == {"index.similarity.s.type": "LMDirichlet"}

    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValueError):
        load_settings_file(path)


def test_configured_settings_prefer_the_file(tmp_path) -> None:
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"index.similarity.s.type": "BM25"}), encoding="utf-8")
    assert load_configured_index_settings(Settings(similarity_settings_file=str(path))) == {
        "index.similarity.s.type": "BM25"
    }
    profile_settings = load_configured_index_settings(Settings(similarity_profile="probabilistic"))
    assert profile_settings["index.similarity.lm_jm.lambda"] == 0.7


def test_explicit_empty_inline_settings_are_used() -> None:
    assert resolve_index_settings("bm25_short_fields", {}) == {}
