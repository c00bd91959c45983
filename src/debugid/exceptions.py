from __future__ import annotations


def format_value(value: object) -> str:
    if isinstance(value, bytes | bytearray | memoryview):
        return f"0x{bytes(value).hex()}"
    else:
        return repr(value)


class ParseDebugIdError(ValueError):
    def __init__(self, value: object, reason: str):
        super().__init__(f"Invalid debug identifier {format_value(value)}: {reason}")
        self.value = value
        self.reason = reason


class InvalidLength(ParseDebugIdError):
    pass


class InvalidCharacter(ParseDebugIdError):
    def __init__(self, value: str, position: int, reason: str | None = None):
        if reason is None:
            reason = f"unexpected character {value[position]!r} at position {position}"
        super().__init__(value, reason)
        self.position = position


class InvalidAppendix(ParseDebugIdError):
    pass


class ParseCodeIdError(ValueError):
    def __init__(self, value: str, reason: str):
        super().__init__(f"Invalid code identifier {value!r}: {reason}")
        self.value = value
        self.reason = reason


class SerializationError(ValueError):
    pass
