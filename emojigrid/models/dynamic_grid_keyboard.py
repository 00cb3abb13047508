"""Keyboard whose keys are added at runtime and laid out in a grid."""

import threading
from collections import deque
from dataclasses import dataclass, replace
from typing import Iterable, Optional, Tuple

from emojigrid.models.key import Key, Keyboard, KeySource
from emojigrid.utils.recent_keys import load_recent_keys, save_recent_keys
from emojigrid.utils.settings import settings

TEMPLATE_KEY_CODE_0 = 0x30
TEMPLATE_KEY_CODE_1 = 0x31


def _get_template_key(template_keyboard: Keyboard, code: int) -> Key:
    for key in template_keyboard.get_keys():
        if key.code == code:
            return key
    raise RuntimeError(f"Can't find template key: code={code}")


@dataclass(frozen=True)
class GridLayoutParameters:
    """Spacing constants of the grid, read off two anchor keys."""
    left_padding: int
    horizontal_step: int
    vertical_step: int
    columns_count: int
    top_padding: int

    @classmethod
    def from_template(cls, template_keyboard: Keyboard) -> 'GridLayoutParameters':
        key0 = _get_template_key(template_keyboard, TEMPLATE_KEY_CODE_0)
        key1 = _get_template_key(template_keyboard, TEMPLATE_KEY_CODE_1)
        horizontal_step = abs(key1.x - key0.x)
        if horizontal_step <= 0:
            raise RuntimeError(
                f"Template keys {TEMPLATE_KEY_CODE_0} and {TEMPLATE_KEY_CODE_1} "
                f"share the same x position: {key0.x}")
        columns_count = template_keyboard.base_width // horizontal_step
        if columns_count < 1:
            raise RuntimeError(
                f"Base width {template_keyboard.base_width} is narrower than "
                f"one column of {horizontal_step}")
        return cls(left_padding=key0.x,
                   horizontal_step=horizontal_step,
                   vertical_step=key0.height + template_keyboard.vertical_gap,
                   columns_count=columns_count,
                   top_padding=template_keyboard.top_padding)

    def position(self, index: int) -> Tuple[int, int]:
        column = index % self.columns_count
        row = index // self.columns_count
        return (column * self.horizontal_step + self.left_padding,
                row * self.vertical_step + self.top_padding)


class GridKey:
    """A key placed in the grid, with coordinates that follow its slot."""

    def __init__(self, original_key: Key):
        self.original_key = original_key
        self.current_x = original_key.x
        self.current_y = original_key.y

    @property
    def identity(self):
        return self.original_key.identity

    def update_coordinates(self, x: int, y: int):
        self.current_x = x
        self.current_y = y

    def to_key(self) -> Key:
        return replace(self.original_key, x=self.current_x, y=self.current_y)

    def __repr__(self):
        return (f'GridKey({self.original_key!r}, '
                f'x={self.current_x}, y={self.current_y})')


class DynamicGridKeyboard:
    """
    Bounded, deduplicated list of keys shown in a fixed-column grid.

    Adding a key removes any equal key already present, inserts it at the
    front or back, evicts from the back past `max_key_count` and lays every
    key out again. When the page is the recents page, adding at the front
    also stores the new order in the settings.
    """

    def __init__(self, template_keyboard: Keyboard, max_key_count: int,
                 is_recents: bool = False, settings_store=None):
        if max_key_count < 1:
            raise ValueError(f'max_key_count must be positive, got {max_key_count}')
        self.layout = GridLayoutParameters.from_template(template_keyboard)
        self.max_key_count = max_key_count
        self.is_recents = is_recents
        self._settings = settings_store if settings_store is not None else settings
        self._lock = threading.Lock()
        self._grid_keys = deque()
        self._cached_keys: Optional[Tuple[Key, ...]] = None

    def __len__(self):
        with self._lock:
            return len(self._grid_keys)

    def add_key_first(self, used_key: Key):
        codes = self.add_key(used_key, add_first=True)
        if self.is_recents:
            # Persist outside the lock.
            save_recent_keys(self._settings, codes)

    def add_key_last(self, used_key: Key):
        self.add_key(used_key, add_first=False)

    def add_key(self, used_key: Key, add_first: bool) -> Tuple[int, ...]:
        """
        Insert `used_key` and re-lay out the grid.

        Returns:
            Codes of the grid keys in their new order.
        """
        with self._lock:
            self._cached_keys = None
            identity = used_key.identity
            duplicates = [grid_key for grid_key in self._grid_keys
                          if grid_key.identity == identity]
            for grid_key in duplicates:
                self._grid_keys.remove(grid_key)

            grid_key = GridKey(used_key)
            if add_first:
                self._grid_keys.appendleft(grid_key)
            else:
                self._grid_keys.append(grid_key)
            while len(self._grid_keys) > self.max_key_count:
                self._grid_keys.pop()

            for index, grid_key in enumerate(self._grid_keys):
                grid_key.update_coordinates(*self.layout.position(index))
            return tuple(grid_key.original_key.code
                         for grid_key in self._grid_keys)

    def get_keys(self) -> Tuple[Key, ...]:
        with self._lock:
            if self._cached_keys is None:
                self._cached_keys = tuple(grid_key.to_key()
                                          for grid_key in self._grid_keys)
            return self._cached_keys

    def get_nearest_keys(self, x: int, y: int) -> Tuple[Key, ...]:
        # TODO: Calculate the nearest key index from x and y.
        return self.get_keys()

    def get_key(self, code: int) -> Optional[Key]:
        for key in self.get_keys():
            if key.code == code:
                return key
        return None

    def load_recent_keys(self, keyboards: Iterable[KeySource]) -> int:
        return load_recent_keys(self, self._settings, keyboards)
