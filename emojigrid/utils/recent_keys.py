"""
Persistence of the recents page.

The order of the recents page is stored as a single settings value holding
the key codes front first, each followed by a comma. On restore the codes are
resolved back into keys through other keyboards, since only the code is kept.
"""

import re
from typing import Iterable, List

from emojigrid.models.key import KeySource
from emojigrid.utils.settings import (read_emoji_recent_keys,
                                      write_emoji_recent_keys)

# Recent codes are saved as an integer array, so we use comma as a separator.
RECENT_KEY_SEPARATOR = ','
_KEY_CODE_PATTERN = re.compile(r'-?[0-9]+')


def serialize_recent_codes(codes: Iterable[int]) -> str:
    return ''.join(f'{code}{RECENT_KEY_SEPARATOR}' for code in codes)


def parse_recent_codes(value: str) -> List[int]:
    """
    Parse a stored recents string into key codes.

    Empty tokens (trailing or doubled separators) are ignored. Tokens that are
    not integers are skipped so that one bad entry does not lose the rest of
    the history.
    """
    codes = []
    if not value:
        return codes
    for token in value.split(RECENT_KEY_SEPARATOR):
        if not token:
            continue
        if _KEY_CODE_PATTERN.fullmatch(token):
            codes.append(int(token))
        else:
            print(f"[RecentKeys] Skipping malformed key code: {token!r}")
    return codes


def save_recent_keys(settings_store, codes: Iterable[int]):
    write_emoji_recent_keys(settings_store, serialize_recent_codes(codes))


def load_recent_keys(keyboard, settings_store,
                     keyboards: Iterable[KeySource]) -> int:
    """
    Restore `keyboard` from the stored recents string.

    Each code is resolved through the first keyboard in `keyboards` that knows
    it and appended to the back of `keyboard` without persisting again. Codes
    no keyboard knows are dropped.

    Returns:
        Number of keys restored.
    """
    codes = parse_recent_codes(read_emoji_recent_keys(settings_store))
    if not codes:
        return 0

    keyboards = list(keyboards)
    restored = 0
    for code in codes:
        for source in keyboards:
            key = source.get_key(code)
            if key is not None:
                keyboard.add_key_last(key)
                restored += 1
                break

    dropped = len(codes) - restored
    if dropped:
        print(f"[RecentKeys] Restored {restored} recent keys, "
              f"dropped {dropped} unknown codes")
    return restored
