"""Character definitions: animations, keyframes and sprite-part frames."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path

from .binio import BinaryReader, InvalidDataError

_log = logging.getLogger(__name__)

MAX_ANIMATIONS = 2_000
MAX_KEYFRAMES = 10_000
MAX_FRAMES = 20_000
MAX_PARTS = 32
IDLE_ANIMATION = "idle"


@dataclass
class Part:
    """A single sprite part of a frame."""

    idx: int
    location: tuple[float, float]
    rotation: float
    scaling: tuple[float, float]
    flip: int
    parent: int
    parent_loc_offset: tuple[float, float] = (0.0, 0.0)
    parent_rotation_offset: float = 0.0


@dataclass
class Frame:
    """One animation frame, holding up to 32 parts."""

    parts: list[Part] = field(default_factory=list)


@dataclass
class KeyFrame:
    """A keyframe; ``frame_ref`` indexes into ``CharDef.frames``."""

    frame_ref: int


@dataclass
class Animation:
    """A named sequence of keyframes."""

    name: str
    key_frames: list[KeyFrame] = field(default_factory=list)


def _read_bounded(reader: BinaryReader, limit: int, what: str, suffix: str = "") -> int:
    count = reader.read_i32()
    if not 0 <= count <= limit:
        raise InvalidDataError(f"Implausible {what} {count}{suffix}")
    return count


def _read_animation(reader: BinaryReader) -> Animation | None:
    name = reader.read_string()
    if not name:
        # An unnamed entry carries no further data.
        return None
    key_frames = []
    for _ in range(_read_bounded(reader, MAX_KEYFRAMES, "keyframe count")):
        frame_ref = reader.read_i32()
        reader.read_i32()  # duration
        reader.read_u8()  # lerp
        for _ in range(reader.read_u8()):
            reader.read_string()  # script
        key_frames.append(KeyFrame(frame_ref))
    return Animation(name, key_frames)


def _read_part(reader: BinaryReader) -> Part:
    idx = reader.read_i32()
    location = (reader.read_f32(), reader.read_f32())
    rotation = reader.read_f32()
    scaling = (reader.read_f32(), reader.read_f32())
    flip = reader.read_i32()
    parent = reader.read_i32()
    part = Part(idx, location, rotation, scaling, flip, parent)
    if parent > -1:
        part.parent_loc_offset = (reader.read_f32(), reader.read_f32())
        part.parent_rotation_offset = reader.read_f32()
    return part


def _read_frame(reader: BinaryReader, index: int) -> Frame | None:
    if not reader.read_bool():
        return None
    count = _read_bounded(
        reader, MAX_PARTS, "parts count", f" at frame index {index}"
    )
    return Frame([_read_part(reader) for _ in range(count)])


@dataclass
class CharDef:
    """A character definition; absent frames are dropped from ``frames``."""

    name: str
    tex_name: str
    animations: list[Animation] = field(default_factory=list)
    frames: list[Frame] = field(default_factory=list)

    @classmethod
    def load_from_bytes(cls, data: bytes, name: str) -> "CharDef":
        reader = BinaryReader(data)
        reader.read_string()  # path
        tex_name = reader.read_string()
        reader.read_i32()  # specular texture

        anim_count = _read_bounded(reader, MAX_ANIMATIONS, "animation count")
        animations = [
            anim
            for anim in (_read_animation(reader) for _ in range(anim_count))
            if anim is not None
        ]

        frame_count = _read_bounded(reader, MAX_FRAMES, "frame count")
        frames = [
            frame
            for frame in (_read_frame(reader, k) for k in range(frame_count))
            if frame is not None
        ]
        return cls(name, tex_name, animations, frames)

    @classmethod
    def load_from_path(cls, path: str | PathLike[str]) -> "CharDef":
        """Parse a file; the character is named after the file's stem."""
        file_path = Path(path)
        return cls.load_from_bytes(file_path.read_bytes(), file_path.stem)

    def idle_frame(self) -> Frame | None:
        """The first frame of the idle animation (or of the first animation)."""
        anim = next((a for a in self.animations if a.name == IDLE_ANIMATION), None)
        if anim is None:
            if not self.animations:
                return None
            anim = self.animations[0]
        if not anim.key_frames:
            return None

        ref = anim.key_frames[0].frame_ref
        if 0 <= ref < len(self.frames):
            return self.frames[ref]
        _log.warning(
            "Idle frame_ref %d out of %d frames, using first frame", ref, len(self.frames)
        )
        return self.frames[0] if self.frames else None