from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple

CORE_FIELDS = ("id", "username", "email")


class _Missing:
    def __repr__(self) -> str:
        return "<missing>"


# Marks a core field the source record did not carry, as opposed to a JSON null
_MISSING: Any = _Missing()


def strict_equals(left: Any, right: Any) -> bool:
    """Equality that does not treat booleans as the numbers 0 and 1."""
    if isinstance(left, bool) != isinstance(right, bool):
        return False
    return left == right


@dataclass
class UserRecord:
    """One user as received from the source.

    ``id``, ``username`` and ``email`` are lifted out; every other field is kept
    untouched in ``extra``. A core field the source left out holds ``_MISSING``,
    while one sent as ``null`` holds ``None`` and still counts as present.
    ``to_dict`` gives the fields back in the order the source sent them.
    """

    id: Optional[Any] = _MISSING
    username: Optional[Any] = _MISSING
    email: Optional[Any] = _MISSING
    extra: Dict[str, Any] = field(default_factory=dict)
    field_order: Tuple[str, ...] = field(default=(), repr=False, compare=False)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "UserRecord":
        extra = {key: value for key, value in data.items() if key not in CORE_FIELDS}
        return cls(
            id=data.get("id", _MISSING),
            username=data.get("username", _MISSING),
            email=data.get("email", _MISSING),
            extra=extra,
            field_order=tuple(data.keys()),
        )

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        for key in self.field_order:
            if key in self:
                result[key] = self[key]
        for name in CORE_FIELDS:
            if name not in result and name in self:
                result[name] = self[name]
        for key, value in self.extra.items():
            result.setdefault(key, value)
        return result

    def keys(self) -> Iterator[str]:
        return iter(self.to_dict())

    def __contains__(self, key: object) -> bool:
        if key in CORE_FIELDS:
            return getattr(self, key) is not _MISSING  # type: ignore[arg-type]
        return key in self.extra

    def __getitem__(self, key: str) -> Any:
        if key in CORE_FIELDS:
            value = getattr(self, key)
            if value is _MISSING:
                raise KeyError(key)
            return value
        return self.extra[key]

    def get(self, key: str, default: Any = None) -> Any:
        try:
            return self[key]
        except KeyError:
            return default
