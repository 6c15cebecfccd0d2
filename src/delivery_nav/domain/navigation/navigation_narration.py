# delivery_nav/domain/navigation/navigation_narration.py
from collections.abc import Iterable

from delivery_nav.domain.entities.delivery import Command, Proceed, Turn
from delivery_nav.domain.entities.geography import Segment
from delivery_nav.domain.geometry import angle_between, angle_of_line, segment_miles

# (upper bound exclusive, label); anything >= 337.5 wraps back to east
_COMPASS = (
    (22.5, "east"),
    (67.5, "northeast"),
    (112.5, "north"),
    (157.5, "northwest"),
    (202.5, "west"),
    (247.5, "southwest"),
    (292.5, "south"),
    (337.5, "southeast"),
)


def direction_label(angle: float) -> str:
    for upper, label in _COMPASS:
        if angle < upper:
            return label
    return "east"


def turn_label(angle: float) -> str | None:
    """Left in [1, 180), right in [180, 360); None means straight on."""
    if 1.0 <= angle < 180.0:
        return "left"
    if 180.0 <= angle < 360.0:
        return "right"
    return None


def narrate_leg(segments: Iterable[Segment]) -> list[Command]:
    """
    Collapse a leg into Turn/Proceed commands.

    Consecutive segments on the same street add up into one Proceed. At a street
    change the Turn onto the new street is emitted, then the Proceed for the
    street just finished. The last street is flushed at the end of the leg.
    """
    out: list[Command] = []
    first: Segment | None = None  # first segment of the current street run
    prev: Segment | None = None
    miles = 0.0
    for seg in segments:
        if prev is not None and seg.name != prev.name:
            turn = turn_label(angle_between(prev, seg))
            if turn:
                out.append(Turn(turn, seg.name))
            out.append(Proceed(direction_label(angle_of_line(first)), first.name, miles))
            first, miles = None, 0.0
        if first is None:
            first = seg
        miles += segment_miles(seg)
        prev = seg
    if first is not None:
        out.append(Proceed(direction_label(angle_of_line(first)), first.name, miles))
    return out
