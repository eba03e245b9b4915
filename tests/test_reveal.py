import pytest

from portfolio.core.reveal import REVEAL_THRESHOLD, RevealTracker, observer_script


def test_block_starts_hidden():
    tracker = RevealTracker()
    tracker.observe("about")

    assert tracker.visible_blocks == []


def test_reveal_fires_once():
    tracker = RevealTracker()
    tracker.observe("about")

    fired = [tracker.notify("about", ratio) for ratio in (0.5, 0.0, 0.9, 1.0)]

    assert fired == [True, False, False, False]
    assert tracker.visible_blocks == ["about"]


def test_below_threshold_keeps_observing():
    tracker = RevealTracker()
    tracker.observe("skills")

    assert not tracker.notify("skills", REVEAL_THRESHOLD / 2)
    assert tracker.visible_blocks == []
    assert tracker.notify("skills", REVEAL_THRESHOLD)


def test_unobserved_block_is_ignored():
    tracker = RevealTracker()

    assert not tracker.notify("projects", 1.0)
    assert tracker.visible_blocks == []


def test_observe_after_reveal_does_not_rearm():
    tracker = RevealTracker(visible=["resume"])

    tracker.observe("resume")

    assert not tracker.notify("resume", 1.0)
    assert tracker.visible_blocks == ["resume"]


def test_forget_allows_a_new_instance_to_reveal():
    tracker = RevealTracker()
    tracker.observe("contact")
    tracker.notify("contact", 1.0)

    tracker.forget("contact")
    tracker.observe("contact")

    assert tracker.visible_blocks == []
    assert tracker.notify("contact", 0.2)


def test_invalid_ratio_is_rejected():
    tracker = RevealTracker()
    tracker.observe("about")

    with pytest.raises(ValueError):
        tracker.notify("about", 1.5)


def test_invalid_threshold_is_rejected():
    with pytest.raises(ValueError):
        RevealTracker(threshold=2.0)


def test_observer_script_has_fallback_and_unsubscribes():
    script = observer_script("reveal-about")

    assert 'getElementById("reveal-about")' in script
    assert "'IntersectionObserver' in window" in script
    assert "unobserve(el)" in script
    assert f"threshold: {REVEAL_THRESHOLD}" in script
