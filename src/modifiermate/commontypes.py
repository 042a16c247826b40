class ModifierMateError(Exception):
    pass


class NotAKeyEventError(ModifierMateError):
    def __init__(self, event):
        return super().__init__(f"Not a key event: {event!r}")
