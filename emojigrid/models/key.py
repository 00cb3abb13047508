"""Keys placed on a keyboard grid and the template keyboard they come from."""

from dataclasses import dataclass, field
from typing import NamedTuple, Optional, Protocol, Sequence

from PySide6.QtCore import QRect


class KeyIdentity(NamedTuple):
    """Fields that decide whether two keys are the same key."""
    code: int
    label: Optional[str]
    output_text: Optional[str]


@dataclass(frozen=True)
class Key:
    """A key with its code, text and geometry on a keyboard."""
    code: int
    label: Optional[str] = None
    output_text: Optional[str] = None
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @property
    def identity(self) -> KeyIdentity:
        # Position and size are not part of a key's identity.
        return KeyIdentity(self.code, self.label, self.output_text)

    @property
    def hit_box(self) -> QRect:
        return QRect(self.x, self.y, self.width, self.height)


class KeySource(Protocol):
    """Anything that can resolve a key code to one of its keys."""

    def get_key(self, code: int) -> Optional[Key]:
        ...


@dataclass
class Keyboard:
    """
    Template keyboard: a fixed set of keys plus the layout metrics of the
    view that hosts it.
    """
    keys: Sequence[Key] = field(default_factory=list)
    base_width: int = 0
    vertical_gap: int = 0
    top_padding: int = 0

    def get_keys(self) -> Sequence[Key]:
        return self.keys

    def get_key(self, code: int) -> Optional[Key]:
        for key in self.keys:
            if key.code == code:
                return key
        return None
