"""
Frame model - one snapshot of the whole LED strip.

✔ Led   - (r, g, b) channel triple, NOT range-checked
✔ Frame - immutable ordered sequence of Led (index = physical position)

Channel values outside 0-255 are kept as given; the DDP encoder truncates
them to their low 8 bits on the wire.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, NamedTuple, Sequence, Tuple, overload


class Led(NamedTuple):
    """One LED color: red, green, blue channel values."""
    r: int
    g: int
    b: int


BLACK = Led(0, 0, 0)


@dataclass(frozen=True)
class Frame:
    """
    Immutable LED strip snapshot.

    A new Frame is built every animation tick; nothing mutates it afterwards.

    Examples:
        frame = Frame.filled(250)                      # all off
        frame = Frame.filled(3, Led(255, 0, 0))        # all red
        frame = Frame.from_rgb([[255, 0, 0], [0, 255, 0]])
    """

    leds: Tuple[Led, ...] = field(default_factory=tuple)

    # === CONSTRUCTORS ===

    @classmethod
    def filled(cls, count: int, fill: Led = BLACK) -> "Frame":
        """
        Create a frame of `count` LEDs all set to `fill`.

        Args:
            count: Number of LEDs (must not be negative)
            fill: Color for every LED, defaults to off

        Returns:
            Frame with len == count
        """
        if count < 0:
            raise ValueError(f"LED count must not be negative, got {count}")
        return cls(tuple(Led(*fill) for _ in range(count)))

    @classmethod
    def from_rgb(cls, colors: Iterable[Sequence[int]]) -> "Frame":
        """Create a frame from any iterable of (r, g, b) sequences."""
        return cls(tuple(Led(c[0], c[1], c[2]) for c in colors))

    # === SEQUENCE PROTOCOL ===

    def __len__(self) -> int:
        return len(self.leds)

    def __iter__(self) -> Iterator[Led]:
        return iter(self.leds)

    @overload
    def __getitem__(self, index: int) -> Led: ...

    @overload
    def __getitem__(self, index: slice) -> Tuple[Led, ...]: ...

    def __getitem__(self, index):
        return self.leds[index]
