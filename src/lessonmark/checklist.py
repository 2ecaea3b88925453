"""Caller-owned checklist toggle state.

The parser bakes each item's default (``[x]`` or ``[ ]``) into the AST
and never looks at toggle state. A viewer keeps one ChecklistState per
open lesson, records the learner's clicks in it by item key, and passes
it to the renderer.

Because keys are regenerated identically on every parse of the same
document, the state survives re-parsing and re-rendering.

Example:
    >>> from lessonmark import parse, ChecklistState
    >>> doc = parse("- [ ] Read the intro\\n- [x] Install Node")
    >>> items = doc.children[0].items
    >>> state = ChecklistState()
    >>> state.toggle(items[0].key)
    True
    >>> [state.is_checked(item) for item in items]
    [True, True]

Thread Safety:
Not thread-safe. Own one instance per viewer session.

"""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from lessonmark.nodes import ChecklistItem


class ChecklistState:
    """Mutable mapping of checklist key to overridden checked state.

    Keys without an override fall back to the item's parsed default.

    """

    __slots__ = ("_overrides",)

    def __init__(self, overrides: Mapping[int, bool] | None = None) -> None:
        """Initialize state, optionally restoring saved overrides.

        Args:
            overrides: Previously saved key -> checked pairs
        """
        self._overrides: dict[int, bool] = dict(overrides or {})

    def is_checked(self, item: ChecklistItem) -> bool:
        """Effective state of item: the override if set, else its default."""
        return self._overrides.get(item.key, item.checked)

    def get(self, key: int) -> bool | None:
        """Override for key, or None if the learner never touched it."""
        return self._overrides.get(key)

    def set(self, key: int, checked: bool) -> None:
        """Record an explicit state for key."""
        self._overrides[key] = checked

    def toggle(self, key: int, default: bool = False) -> bool:
        """Flip the state of key and return the new state.

        Args:
            key: Checklist item key
            default: State to flip from when key has no override yet
                (pass the item's parsed ``checked`` value)

        Returns:
            The new checked state
        """
        checked = not self._overrides.get(key, default)
        self._overrides[key] = checked
        return checked

    def toggle_item(self, item: ChecklistItem) -> bool:
        """Flip item's effective state and return the new state."""
        return self.toggle(item.key, default=item.checked)

    def clear(self) -> None:
        """Drop all overrides, returning every item to its default."""
        self._overrides.clear()

    def overrides(self) -> dict[int, bool]:
        """Snapshot of the overrides, e.g. for persisting progress."""
        return dict(self._overrides)

    def __contains__(self, key: object) -> bool:
        return key in self._overrides

    def __iter__(self) -> Iterator[int]:
        return iter(self._overrides)

    def __len__(self) -> int:
        return len(self._overrides)

    def __repr__(self) -> str:
        return f"ChecklistState({self._overrides!r})"
