from portfolio.core.navigation import (
    HEADER_OFFSET,
    NAV_LINKS,
    SCROLLED_CLASS,
    SCROLLED_THRESHOLD,
    scroll_script,
    scroll_shadow_script,
)


def test_nav_links_cover_sections():
    assert [link.section_id for link in NAV_LINKS] == [
        "about",
        "skills",
        "projects",
        "resume",
        "contact",
    ]
    assert NAV_LINKS[0].href == "#about"


def test_scroll_script_offsets_by_header():
    script = scroll_script("projects")

    assert 'getElementById("projects")' in script
    assert f"Math.max(0, el.offsetTop - {HEADER_OFFSET})" in script
    assert "behavior: 'smooth'" in script


def test_scroll_script_uses_given_offset():
    assert "el.offsetTop - 64)" in scroll_script("about", header_offset=64)


def test_scroll_script_is_noop_for_missing_target():
    script = scroll_script("projects")

    assert script.index("if (!el) { return; }") < script.index("window.scrollTo")


def test_scroll_script_escapes_section_id():
    script = scroll_script('x"); alert(1); ("')

    assert 'getElementById("x\\"); alert(1); (\\"")' in script


def test_scroll_shadow_script_marks_root_past_threshold():
    script = scroll_shadow_script()

    assert f'classList.toggle("{SCROLLED_CLASS}", window.scrollY > {SCROLLED_THRESHOLD})' in script
    assert "addEventListener('scroll'" in script
