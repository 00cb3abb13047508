from concurrent.futures import Executor, Future
from enum import Enum
from typing import Dict, Iterable, List

from emojigrid.models.dynamic_grid_keyboard import DynamicGridKeyboard
from emojigrid.models.key import Key, Keyboard
from emojigrid.utils.settings import DEFAULT_SETTINGS, settings


class EmojiCategory(Enum):
    RECENTS = 0
    PEOPLE = 1
    NATURE = 2
    OBJECTS = 3
    PLACES = 4
    SYMBOLS = 5


class EmojiPageSet:
    """Recents page plus the grid pages of every emoji category."""

    def __init__(self, template_keyboard: Keyboard, settings_store=None):
        self._template_keyboard = template_keyboard
        self._settings = settings_store if settings_store is not None else settings
        self.max_recent_count = self._settings.value(
            'emoji_recents_max_count',
            defaultValue=DEFAULT_SETTINGS['emoji_recents_max_count'], type=int)
        self.keys_per_page = self._settings.value(
            'emoji_keys_per_page',
            defaultValue=DEFAULT_SETTINGS['emoji_keys_per_page'], type=int)
        if self.keys_per_page < 1:
            raise ValueError(f'emoji_keys_per_page must be positive, '
                             f'got {self.keys_per_page}')
        self.recents = DynamicGridKeyboard(
            template_keyboard, self.max_recent_count, is_recents=True,
            settings_store=self._settings)
        self._pages: Dict[EmojiCategory, List[DynamicGridKeyboard]] = {
            category: [] for category in EmojiCategory
            if category is not EmojiCategory.RECENTS
        }

    def add_category_keys(self, category: EmojiCategory, keys: Iterable[Key]):
        """Split `keys` into grid pages of `keys_per_page` and append them."""
        if category is EmojiCategory.RECENTS:
            raise ValueError('The recents page is filled by used keys only')
        page = None
        for key in keys:
            if page is None or len(page) >= self.keys_per_page:
                page = DynamicGridKeyboard(
                    self._template_keyboard, self.keys_per_page,
                    settings_store=self._settings)
                self._pages[category].append(page)
            page.add_key_last(key)

    def get_pages(self, category: EmojiCategory) -> List[DynamicGridKeyboard]:
        if category is EmojiCategory.RECENTS:
            return [self.recents]
        return list(self._pages[category])

    def category_pages(self) -> List[DynamicGridKeyboard]:
        return [page for category in EmojiCategory
                if category is not EmojiCategory.RECENTS
                for page in self._pages[category]]

    def on_key_used(self, key: Key):
        self.recents.add_key_first(key)

    def load_recent_keys(self) -> int:
        restored = self.recents.load_recent_keys(self.category_pages())
        print(f"[EmojiPages] Loaded {restored} recent keys")
        return restored

    def load_recent_keys_async(self, executor: Executor) -> Future:
        return executor.submit(self.load_recent_keys)
