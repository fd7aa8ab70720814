"""Strongly typed identifiers for bot directory entities.

Using NewType for strong typing prevents mixing up bot and user IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Directory entries are keyed by a UUID assigned at creation
BotId = NewType("BotId", UUID)

# Users come from the external auth guard as opaque strings (e.g. Discord snowflakes)
UserId = NewType("UserId", str)
