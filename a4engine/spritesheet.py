"""Named animations laid out on a sprite sheet."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Animation:
    """One animation: frame size, first frame position, frame count and duration."""

    size: tuple[int, int]
    start: tuple[int, int]
    frame_count: int
    frame_duration: float


class Spritesheet:
    """An ordered collection of animations, also reachable by name."""

    def __init__(self) -> None:
        self._animations: list[Animation] = []
        self._by_name: dict[str, int] = {}

    def add_animation(
        self,
        name: str,
        frame_count: int,
        frame_duration: float,
        start: tuple[int, int],
        size: tuple[int, int],
    ) -> None:
        """Append an animation; a name already in use keeps its first animation."""
        self._by_name.setdefault(name, len(self._animations))
        self._animations.append(
            Animation(
                size=tuple(size),
                start=tuple(start),
                frame_count=frame_count,
                frame_duration=frame_duration,
            )
        )

    def get_animation(self, index: int) -> Animation:
        """Return the animation at ``index``; raises IndexError if out of range."""
        if not 0 <= index < len(self._animations):
            raise IndexError(f"animation index {index} out of range")
        return self._animations[index]

    def get_animation_by_name(self, name: str) -> Optional[int]:
        """Return the index of the named animation, or None if unknown."""
        return self._by_name.get(name)

    def __len__(self) -> int:
        return len(self._animations)