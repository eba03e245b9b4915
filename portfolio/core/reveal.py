"""One-shot reveal of content blocks entering the viewport."""

from __future__ import annotations

import json
from typing import Iterable, List, Set

REVEAL_THRESHOLD = 0.1
REVEAL_DURATION = 0.6
REVEAL_OFFSET_PX = 50

REVEAL_TRANSITION = (
    f"opacity {REVEAL_DURATION}s ease-out, transform {REVEAL_DURATION}s ease-out"
)


class RevealTracker:
    """Tracks which blocks have been revealed.

    A block moves from hidden to visible exactly once. After that it is no
    longer observed and further notifications are ignored.
    """

    def __init__(
        self,
        threshold: float = REVEAL_THRESHOLD,
        visible: Iterable[str] = (),
    ) -> None:
        if not 0.0 <= threshold <= 1.0:
            raise ValueError("threshold must be between 0 and 1")
        self.threshold = threshold
        self._visible: List[str] = []
        self._observing: Set[str] = set()
        for block_id in visible:
            if block_id not in self._visible:
                self._visible.append(block_id)

    @property
    def visible_blocks(self) -> List[str]:
        return list(self._visible)

    def observe(self, block_id: str) -> None:
        if block_id not in self._visible:
            self._observing.add(block_id)

    def notify(self, block_id: str, ratio: float) -> bool:
        """Record an intersection; True only for the triggering notification."""

        if not 0.0 <= ratio <= 1.0:
            raise ValueError("intersection ratio must be between 0 and 1")
        if block_id not in self._observing or ratio < self.threshold:
            return False
        self._observing.discard(block_id)
        self._visible.append(block_id)
        return True

    def forget(self, block_id: str) -> None:
        """Drop a block whose mounted instance went away."""

        self._observing.discard(block_id)
        if block_id in self._visible:
            self._visible.remove(block_id)


def observer_script(block_id: str, threshold: float = REVEAL_THRESHOLD) -> str:
    """Client code resolving with ``{id, ratio}`` on the first intersection.

    Without ``IntersectionObserver`` (or without the element) it resolves at
    once with a full ratio so the block simply renders visible.
    """

    target = json.dumps(block_id)
    return (
        "new Promise(function (resolve) {"
        f"var el = document.getElementById({target});"
        "if (!el || !('IntersectionObserver' in window)) {"
        f"resolve({{id: {target}, ratio: 1}}); return; }}"
        "var observer = new IntersectionObserver(function (entries) {"
        "var entry = entries[0];"
        f"if (entry.isIntersecting && entry.intersectionRatio >= {threshold}) {{"
        "observer.unobserve(el); observer.disconnect();"
        f"resolve({{id: {target}, ratio: Math.min(1, entry.intersectionRatio)}}); }}"
        f"}}, {{threshold: {threshold}}});"
        "observer.observe(el);"
        "})"
    )
