"""Exceptions raised while converting a font to a bitmap."""


class Font2PbmError(Exception):
    """Base class for every error the converter reports to the user."""


class IllegalSizeError(Font2PbmError):
    def __init__(self, token: str):
        super().__init__(f'Illegal size specification "{token}"')
        self.token = token


class IllegalCountError(Font2PbmError):
    def __init__(self, token: str):
        super().__init__(f'Illegal number of chars "{token}"')
        self.token = token


class InputOpenError(Font2PbmError):
    def __init__(self, path: str, reason: str):
        super().__init__(f'Can\'t open "{path}": {reason}')
        self.path = path
        self.reason = reason


class InvalidInputError(Font2PbmError):
    """Raised when the input holds fewer bytes than the font size implies."""

    def __init__(self, source: str):
        super().__init__(f'Invalid input from "{source}"')
        self.source = source


class AllocationError(Font2PbmError):
    def __init__(self):
        super().__init__("Out of memory")
