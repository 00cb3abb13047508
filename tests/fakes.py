from emojigrid.models.key import Key, Keyboard


class FakeSettings:
    """In-memory stand-in for QSettings."""

    def __init__(self, values=None):
        self.values = dict(values or {})
        self.writes = []

    def value(self, key, defaultValue=None, type=None):
        value = self.values.get(key, defaultValue)
        if value is not None and type is not None:
            return type(value)
        return value

    def setValue(self, key, value):
        self.values[key] = value
        self.writes.append((key, value))


class FakeSource:
    def __init__(self, keys):
        self._keys = {key.code: key for key in keys}
        self.lookups = []

    def get_key(self, code):
        self.lookups.append(code)
        return self._keys.get(code)


def make_template(base_width=200, vertical_gap=5, top_padding=7):
    return Keyboard(
        keys=[
            Key(0x30, label='0', x=10, y=3, width=40, height=50),
            Key(0x31, label='1', x=60, y=3, width=40, height=50),
        ],
        base_width=base_width,
        vertical_gap=vertical_gap,
        top_padding=top_padding,
    )


def emoji(code, label=None, output_text=None):
    return Key(code, label=label, output_text=output_text, width=40, height=50)
