"""Timeline-based animation with keyframe interpolation.

A spin is one Timeline: a ``rotation`` track from the resting angle to the
planned target and a ``sweep`` track for the reveal sweep progress.
"""

from typing import Optional, Dict, List
from dataclasses import dataclass, field
from enum import Enum, auto

from spindare.animation.easing import Easing, interpolate


class PlayState(Enum):
    """Timeline playback state."""

    STOPPED = auto()
    PLAYING = auto()
    FINISHED = auto()


@dataclass
class Keyframe:
    """A single keyframe in an animation track.

    Attributes:
        time: Normalized time (0.0 to 1.0) when this keyframe occurs
        value: The value at this keyframe
        easing: Easing used when interpolating from the previous keyframe
    """

    time: float
    value: float
    easing: Easing | str = Easing.LINEAR

    def __post_init__(self):
        self.time = max(0.0, min(1.0, self.time))


@dataclass
class Track:
    """A numeric animation track."""

    name: str
    keyframes: List[Keyframe] = field(default_factory=list)
    _sorted: bool = field(default=False, repr=False)

    def add_keyframe(
        self,
        time: float,
        value: float,
        easing: Easing | str = Easing.LINEAR
    ) -> "Track":
        """Add a keyframe to this track. Returns self for chaining."""
        self.keyframes.append(Keyframe(time, value, easing))
        self._sorted = False
        return self

    def get_value_at(self, t: float) -> Optional[float]:
        """Get the interpolated value at normalized time t."""
        if not self.keyframes:
            return None

        if not self._sorted:
            self.keyframes.sort(key=lambda k: k.time)
            self._sorted = True

        t = max(0.0, min(1.0, t))

        if t <= self.keyframes[0].time:
            return self.keyframes[0].value
        if t >= self.keyframes[-1].time:
            return self.keyframes[-1].value

        prev_kf = self.keyframes[0]
        next_kf = self.keyframes[-1]
        for i, kf in enumerate(self.keyframes):
            if kf.time > t:
                next_kf = kf
                prev_kf = self.keyframes[i - 1]
                break

        segment_duration = next_kf.time - prev_kf.time
        if segment_duration <= 0:
            return prev_kf.value

        local_t = (t - prev_kf.time) / segment_duration
        return interpolate(prev_kf.value, next_kf.value, local_t, next_kf.easing)


@dataclass
class Timeline:
    """A complete animation timeline with multiple tracks.

    Attributes:
        name: Timeline identifier
        duration: Total duration in milliseconds
        tracks: Dictionary of tracks by name
    """

    name: str
    duration: float = 1000.0  # milliseconds
    tracks: Dict[str, Track] = field(default_factory=dict)

    _state: PlayState = field(default=PlayState.STOPPED, repr=False)
    _current_time: float = field(default=0.0, repr=False)

    def add_track(self, name: str) -> Track:
        """Create and add a new track to this timeline."""
        track = Track(name=name)
        self.tracks[name] = track
        return track

    def get_track(self, name: str) -> Optional[Track]:
        """Get a track by name."""
        return self.tracks.get(name)

    def play(self, from_start: bool = False) -> "Timeline":
        """Start or resume playback."""
        if from_start:
            self._current_time = 0.0
        self._state = PlayState.PLAYING
        return self

    def stop(self) -> "Timeline":
        """Stop playback and reset to beginning."""
        self._state = PlayState.STOPPED
        self._current_time = 0.0
        return self

    def finish(self) -> "Timeline":
        """Jump to the end and mark finished."""
        self._current_time = self.duration
        self._state = PlayState.FINISHED
        return self

    @property
    def state(self) -> PlayState:
        return self._state

    @property
    def progress(self) -> float:
        """Get normalized progress (0.0 to 1.0)."""
        if self.duration <= 0:
            return 1.0
        return self._current_time / self.duration

    @property
    def current_time(self) -> float:
        """Get current time in milliseconds."""
        return self._current_time

    @property
    def is_playing(self) -> bool:
        return self._state == PlayState.PLAYING

    @property
    def is_finished(self) -> bool:
        return self._state == PlayState.FINISHED

    def update(self, delta_ms: float) -> Dict[str, Optional[float]]:
        """Advance the timeline and get current track values.

        Args:
            delta_ms: Time elapsed since last update in milliseconds

        Returns:
            Dictionary mapping track names to their current values
        """
        if self._state == PlayState.PLAYING:
            self._current_time += max(0.0, delta_ms)
            if self._current_time >= self.duration:
                self.finish()

        return self.values()

    def values(self) -> Dict[str, Optional[float]]:
        """Get current values for all tracks."""
        t = self.progress
        return {name: track.get_value_at(t) for name, track in self.tracks.items()}

    def get_value(self, track_name: str) -> Optional[float]:
        """Get the current value of a specific track."""
        track = self.tracks.get(track_name)
        if track:
            return track.get_value_at(self.progress)
        return None

    @classmethod
    def spin(
        cls,
        start_angle: float,
        target_angle: float,
        duration: float,
        easing: Easing = Easing.EASE_OUT_CUBIC,
        sweep_delay: Optional[float] = None,
        sweep_duration: float = 0.0,
        name: str = "spin",
    ) -> "Timeline":
        """Create a dial spin with an optional reveal sweep.

        Args:
            start_angle: Resting angle before the spin
            target_angle: Planned resting angle after the spin
            duration: Spin duration in milliseconds
            easing: Easing of the rotation track
            sweep_delay: Milliseconds before the sweep starts, None for no sweep
            sweep_duration: Sweep length in milliseconds
        """
        timeline = cls(name=name, duration=duration)

        rotation = timeline.add_track("rotation")
        rotation.add_keyframe(0.0, start_angle)
        rotation.add_keyframe(1.0, target_angle, easing)

        sweep = timeline.add_track("sweep")
        sweep.add_keyframe(0.0, 0.0)
        if sweep_delay is not None and duration > 0:
            sweep.add_keyframe(sweep_delay / duration, 0.0)
            sweep.add_keyframe((sweep_delay + sweep_duration) / duration, 1.0)
            sweep.add_keyframe(1.0, 1.0)
        else:
            sweep.add_keyframe(1.0, 0.0)

        return timeline
