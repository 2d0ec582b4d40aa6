"""Tweet (merged search record) model."""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, ConfigDict

from ..core.exceptions import ValidationError

_UNSIGNED_INT = re.compile(r"[0-9]+")


class Tweet(BaseModel):
    """One search result with its author embedded.

    The API payload is opaque, so every field of the raw tweet is kept as an
    extra attribute. The identifier, the author foreign key and the embedded
    author are declared but not type checked; only ``parse_id`` inspects a value.
    """

    id_str: Any = None
    user_id_str: Any = None
    user: Any = None

    model_config = ConfigDict(frozen=True, extra="allow")

    @property
    def has_user(self) -> bool:
        return isinstance(self.user, dict)

    def parse_id(self) -> int:
        """Parse ``id_str`` as an unsigned integer.

        Raises:
            ValidationError: If the identifier is missing or not all digits
        """
        if not isinstance(self.id_str, str) or not _UNSIGNED_INT.fullmatch(self.id_str):
            raise ValidationError(f"invalid tweet id: {self.id_str!r}")
        return int(self.id_str)

    def to_dict(self) -> dict[str, Any]:
        """Return the tweet as it came from the API, plus ``user`` when embedded."""
        data = self.model_dump()
        for name in type(self).model_fields:
            if name not in self.model_fields_set:
                data.pop(name, None)
        return data
