"""Frame-by-frame texture animations for game objects."""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Mapping, Optional

from cosmicdodger.entity import Component, GameObject
from cosmicdodger.resources import AnimationFrames, TextureResource

_log = logging.getLogger(__name__)


class Animation:
    """A named sequence of frames shown at a fixed rate.

    ``on_timeout`` is called when a non-looping animation reaches its end.
    """

    def __init__(
        self,
        name: str,
        frames: AnimationFrames,
        frames_per_second: int = 5,
        auto_start: bool = False,
        loop: bool = False,
    ) -> None:
        self.name = name
        self._frames = frames
        self.frames_per_second = int(frames_per_second)
        self.is_playing = auto_start
        self.loop = loop
        self.on_timeout: Optional[Callable[[], None]] = None

    @property
    def frames(self) -> List[TextureResource]:
        return self._frames.frames

    def play(self) -> None:
        self.is_playing = True

    def stop(self) -> None:
        self.is_playing = False


class AnimationComponent(Component):
    """Swaps its parent's texture according to the animation being played."""

    def __init__(self, parent: GameObject, name: str = "NA_AnimationComponent") -> None:
        super().__init__(parent, name, True, True)
        self._animations: Dict[str, Animation] = {}
        self.current_animation: Optional[Animation] = None
        self._frame_index = 0
        self._time_in_frame = 0.0

    @property
    def animations(self) -> Mapping[str, Animation]:
        return dict(self._animations)

    @property
    def current_frame(self) -> Optional[TextureResource]:
        """The frame the current animation is on, or ``None``."""
        if self.current_animation is None:
            return None
        frames = self.current_animation.frames
        return frames[self._frame_index] if frames else None

    def add_animation(self, animation: Animation) -> Optional[Animation]:
        """Register an animation; returns ``None`` if the name is taken."""
        if animation.name in self._animations:
            _log.warning(
                "Unable to add animation '%s' since it already exists!", animation.name
            )
            return None
        self._animations[animation.name] = animation
        return animation

    def play_animation(self, name: str) -> None:
        """Start the named animation from its first frame."""
        animation = self._animations.get(name)
        if animation is None:
            _log.warning("Unable to play animation with name %s NOT FOUND!", name)
            return
        self.current_animation = animation
        animation.play()
        self._frame_index = 0

    def update(self, delta_time: float) -> None:
        animation = self.current_animation
        if animation is None or not animation.is_playing:
            return
        frames = animation.frames
        if not frames:
            return

        self.parent.texture = frames[self._frame_index]

        self._time_in_frame += delta_time
        if self._time_in_frame >= 1.0 / float(animation.frames_per_second):
            self._frame_index += 1
            if self._frame_index == len(frames):
                self._frame_index = 0
                if not animation.loop:
                    animation.stop()
                    if animation.on_timeout is not None:
                        animation.on_timeout()
            self._time_in_frame = 0.0