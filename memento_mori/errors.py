class MementoError(Exception):
    """Base class for errors raised by memento_mori."""


class ConfigError(MementoError):
    pass


class InvalidDateError(ConfigError, ValueError):
    def __init__(self, value: object) -> None:
        super().__init__(f"Incorrect date format {value!r}: must be DMY or YMD with / or -")
        self.value = value


class UnknownLayoutError(MementoError, LookupError):
    def __init__(self, name: str, known: list[str]) -> None:
        super().__init__(f"Unknown layout '{name}', choose one of: {', '.join(known)}")
        self.name = name
