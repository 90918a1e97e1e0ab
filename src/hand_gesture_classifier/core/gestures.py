"""
Gesture labels and the ordered rule table used to pick one per hand.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

from .exceptions import ConfigurationError
from .finger_state import Finger, FingerState


class Gesture(str, Enum):
    INDEX_UP = "INDEX_UP"
    MIDDLE_ONLY = "MIDDLE_ONLY"
    PEACE = "PEACE"
    THUMBS_UP = "THUMBS_UP"
    OPEN_HAND = "OPEN_HAND"
    FIST = "FIST"
    UNKNOWN = "UNKNOWN"

    def __str__(self) -> str:
        return self.value


# Built-in gestures are Gesture members; deployment-defined ones are plain strings
GestureLabel = Union[Gesture, str]


def to_label(name: Any) -> GestureLabel:
    """
    Resolve a name to a Gesture member, or to an upper-case custom label.

    Names are case-insensitive for built-in and custom gestures alike.
    """
    if isinstance(name, Gesture):
        return name
    if not isinstance(name, str) or not name.strip():
        raise ConfigurationError(f"Gesture name must be a non-empty string, got {name!r}")
    name = name.strip().upper()
    if name in Gesture.__members__:
        return Gesture[name]
    return name


@dataclass(frozen=True)
class GestureRule:
    """
    A (predicate, label) pair.

    ``required`` pins fingers to extended (True) or curled (False); fingers not
    listed are ignored. An optional ``predicate`` adds an arbitrary check on top.
    """
    label: GestureLabel
    required: Tuple[Tuple[Finger, bool], ...] = ()
    predicate: Optional[Callable[[FingerState], bool]] = None

    @classmethod
    def from_fingers(cls, label: Any, **fingers: bool) -> "GestureRule":
        try:
            required = tuple((Finger(name.lower()), bool(up)) for name, up in fingers.items())
        except ValueError as e:
            raise ConfigurationError(f"Gesture {label!r}: {e}") from None
        return cls(to_label(label), required)

    def matches(self, state: FingerState) -> bool:
        if any(state[finger] != up for finger, up in self.required):
            return False
        return self.predicate is None or bool(self.predicate(state))


DEFAULT_GESTURE_RULES: Tuple[GestureRule, ...] = (
    GestureRule.from_fingers(Gesture.INDEX_UP, index=True, middle=False, ring=False, pinky=False, thumb=False),
    GestureRule.from_fingers(Gesture.MIDDLE_ONLY, middle=True, index=False, ring=False, pinky=False),
    GestureRule.from_fingers(Gesture.PEACE, index=True, middle=True, ring=False, pinky=False),
    GestureRule.from_fingers(Gesture.THUMBS_UP, thumb=True, index=False, middle=False, ring=False, pinky=False),
    GestureRule.from_fingers(Gesture.OPEN_HAND, index=True, middle=True, ring=True, pinky=True),
    GestureRule.from_fingers(Gesture.FIST, index=False, middle=False, ring=False, pinky=False),
)


class GestureTable:
    """
    Ordered gesture rules evaluated top to bottom; the first match wins.

    UNKNOWN is the implicit catch-all and never appears as a rule, so every
    FingerState maps to exactly one label.
    """

    def __init__(self, rules: Iterable[GestureRule] = DEFAULT_GESTURE_RULES):
        self._rules = tuple(rules)

        seen = set()
        for rule in self._rules:
            if rule.label == Gesture.UNKNOWN:
                raise ConfigurationError("UNKNOWN is the catch-all and cannot be used as a rule")
            if rule.label in seen:
                raise ConfigurationError(f"Duplicate gesture rule: {rule.label}")
            seen.add(rule.label)

    def __iter__(self) -> Iterator[GestureRule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"GestureTable({', '.join(str(label) for label in self.labels)})"

    @property
    def labels(self) -> List[GestureLabel]:
        return [rule.label for rule in self._rules]

    def match(self, state: FingerState) -> GestureLabel:
        for rule in self._rules:
            if rule.matches(state):
                return rule.label
        return Gesture.UNKNOWN

    def reordered(self, labels: Sequence[Any]) -> "GestureTable":
        """
        Return a table with rules in the given order.

        Rules whose label is not listed are dropped.

        Raises:
            ConfigurationError: If a label has no rule in this table
        """
        by_label = {rule.label: rule for rule in self._rules}
        rules = []
        for name in labels:
            label = to_label(name)
            if label not in by_label:
                raise ConfigurationError(f"No gesture rule named {label}")
            rules.append(by_label[label])
        return GestureTable(rules)

    def with_rule(self, rule: GestureRule, before: Optional[Any] = None) -> "GestureTable":
        """
        Return a table with an extra rule.

        Args:
            rule: Rule to add
            before: Label to insert the rule in front of; appended when None

        Raises:
            ConfigurationError: If ``before`` names no rule in this table
        """
        rules = list(self._rules)
        if before is None:
            rules.append(rule)
        else:
            anchor = to_label(before)
            positions = [i for i, existing in enumerate(rules) if existing.label == anchor]
            if not positions:
                raise ConfigurationError(f"Cannot insert {rule.label} before unknown gesture {anchor}")
            rules.insert(positions[0], rule)
        return GestureTable(rules)

    @classmethod
    def from_config(
        cls,
        priority: Optional[Sequence[Any]] = None,
        custom_gestures: Optional[Iterable[Mapping[str, Any]]] = None
    ) -> "GestureTable":
        """
        Build a table from configuration values.

        Args:
            priority: Built-in gesture names in evaluation order; None keeps the default order
            custom_gestures: Entries of the form {"name": ..., "fingers": {...}, "before": ...}

        Returns:
            GestureTable instance
        """
        table = cls()
        if priority is not None:
            for name in priority:
                if not isinstance(to_label(name), Gesture):
                    raise ConfigurationError(f"Unknown built-in gesture in priority list: {name!r}")
            table = table.reordered(priority)

        for entry in custom_gestures or ():
            if "name" not in entry:
                raise ConfigurationError(f"Custom gesture is missing a name: {dict(entry)!r}")
            fingers = entry.get("fingers") or {}
            if not fingers:
                raise ConfigurationError(f"Custom gesture {entry['name']!r} defines no finger states")
            rule = GestureRule.from_fingers(entry["name"], **dict(fingers))
            table = table.with_rule(rule, before=entry.get("before"))

        return table
