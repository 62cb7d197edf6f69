"""Error types raised by the pagination client"""

from typing import Optional


class TubePagerError(Exception):
    pass


class TransportError(TubePagerError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ProtocolShapeError(TubePagerError):
    pass
