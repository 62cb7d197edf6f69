"""Shared base for YouTube entities"""

from typing import Optional


class Base:
    def __init__(self, client=None, id: Optional[str] = None):
        # Back-reference to the shared HTTP client, not owned by the entity
        self.client = client
        self.id = id
