from linkifier.settings_schema import (
    NormalizedLinkifyConfig,
    default_linkify_settings,
    normalize_linkify_settings,
)


def test_defaults():
    cfg = NormalizedLinkifyConfig.from_mapping(default_linkify_settings())
    assert cfg.debounce_ms == 200
    assert cfg.hypertext_priority == 0
    assert cfg.hypertext_enabled is True


def test_non_mapping_falls_back_to_defaults():
    assert normalize_linkify_settings(None) == default_linkify_settings()
    assert normalize_linkify_settings("garbage") == default_linkify_settings()


def test_debounce_is_clamped():
    assert normalize_linkify_settings({"debounce_ms": -5})["debounce_ms"] == 0
    assert normalize_linkify_settings({"debounce_ms": 99999})["debounce_ms"] == 5000
    assert normalize_linkify_settings({"debounce_ms": "50"})["debounce_ms"] == 50
    assert normalize_linkify_settings({"debounce_ms": "soon"})["debounce_ms"] == 200


def test_priority_accepts_any_int():
    assert normalize_linkify_settings({"hypertext_priority": -7})["hypertext_priority"] == -7
    assert normalize_linkify_settings({"hypertext_priority": True})["hypertext_priority"] == 0


def test_enabled_string_values():
    assert normalize_linkify_settings({"hypertext_enabled": "off"})["hypertext_enabled"] is False
    assert normalize_linkify_settings({"hypertext_enabled": "yes"})["hypertext_enabled"] is True
