import pytest

from portfolio.core.theme import (
    DARK_CLASS,
    THEME_STORAGE_KEY,
    THEME_TOKENS,
    StorageUnavailable,
    ThemeController,
    ThemePreference,
    apply_theme_script,
    theme_bootstrap_script,
    theme_stylesheet,
    tone,
)


class DictStore:
    def __init__(self, initial=None):
        self.values = dict(initial or {})

    def get(self, key):
        return self.values.get(key)

    def set(self, key, value):
        self.values[key] = value


class BrokenStore:
    def get(self, key):
        raise StorageUnavailable("storage disabled")

    def set(self, key, value):
        raise OSError("quota exceeded")


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("dark", ThemePreference.DARK),
        ("light", ThemePreference.LIGHT),
        (None, ThemePreference.LIGHT),
        ("", ThemePreference.LIGHT),
        ("purple", ThemePreference.LIGHT),
    ],
)
def test_parse_falls_back_to_light(raw, expected):
    assert ThemePreference.parse(raw) is expected


def test_fresh_start_is_light():
    controller = ThemeController(DictStore())

    assert controller.load() is ThemePreference.LIGHT
    assert controller.preference is ThemePreference.LIGHT


def test_load_reads_before_applying():
    store = DictStore({THEME_STORAGE_KEY: "dark"})
    applied = []
    controller = ThemeController(store, apply=applied.append)

    controller.load()

    assert applied == [ThemePreference.DARK]


@pytest.mark.parametrize("start", ["light", "dark"])
def test_toggle_twice_round_trips(start):
    store = DictStore({THEME_STORAGE_KEY: start})
    controller = ThemeController(store)
    controller.load()

    controller.toggle()
    controller.toggle()

    assert controller.preference.value == start
    assert store.get(THEME_STORAGE_KEY) == start


def test_toggle_writes_through_to_store():
    store = DictStore()
    applied = []
    controller = ThemeController(store, apply=applied.append)
    controller.load()

    result = controller.toggle()

    assert result is ThemePreference.DARK
    assert store.get(THEME_STORAGE_KEY) == controller.preference.value
    assert applied[-1] is controller.preference


def test_unavailable_store_degrades_silently():
    controller = ThemeController(BrokenStore())

    assert controller.load() is ThemePreference.LIGHT
    assert controller.toggle() is ThemePreference.DARK


def test_controller_without_store_still_toggles():
    controller = ThemeController(None)
    controller.load()

    assert controller.toggle() is ThemePreference.DARK


def test_apply_script_toggles_marker_class():
    assert f'"{DARK_CLASS}", true' in apply_theme_script(ThemePreference.DARK)
    assert f'"{DARK_CLASS}", false' in apply_theme_script(ThemePreference.LIGHT)


def test_bootstrap_script_reads_storage_key():
    script = theme_bootstrap_script()

    assert f'getItem("{THEME_STORAGE_KEY}")' in script
    assert "catch" in script


def test_stylesheet_defines_every_token_for_both_themes():
    css = theme_stylesheet()
    light, dark = css.split(f"html.{DARK_CLASS}")

    assert light.startswith(":root")
    for name, (light_value, dark_value) in THEME_TOKENS.items():
        assert f"--{name}: {light_value};" in light
        assert f"--{name}: {dark_value};" in dark


def test_tone_references_custom_property():
    assert tone("page-bg") == "var(--page-bg)"


def test_tone_rejects_unknown_token():
    with pytest.raises(KeyError):
        tone("chartreuse")
