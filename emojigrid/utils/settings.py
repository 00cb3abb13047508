from PySide6.QtCore import QSettings, Signal

# Defaults for settings that are accessed from multiple places.
DEFAULT_SETTINGS = {
    # Comma separated codes of the recents page, front first.
    'emoji_recent_keys': '',
    'emoji_recents_max_count': 32,
    'emoji_keys_per_page': 40,
}


class Settings(QSettings):
    # Signal that shows that the setting with the given string was changes
    change = Signal(str, object, name='settingsChanged')

    def __init__(self, *args):
        # Without arguments the platform store of the application is used.
        super().__init__(*(args or ('emojigrid', 'emojigrid')))

    def setValue(self, key, value):
        super().setValue(key, value)
        self.change.emit(key, value)

# Common shared instance to ensure the Signal is also shared
settings = Settings()


def read_emoji_recent_keys(store) -> str:
    value = store.value('emoji_recent_keys',
                        defaultValue=DEFAULT_SETTINGS['emoji_recent_keys'],
                        type=str)
    return value or ''


def write_emoji_recent_keys(store, value: str):
    store.setValue('emoji_recent_keys', value)
