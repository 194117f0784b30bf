# src/models/user.py

"""Profile of the authenticated user."""

from dataclasses import dataclass
from typing import Any

from src.services.errors import ParseError

_REQUIRED_FIELDS = ("id", "username")


@dataclass
class UserProfile:
    """The last-authenticated user, as returned by the login endpoint."""

    id: int
    username: str
    email: str = ""
    first_name: str = ""
    last_name: str = ""
    gender: str = ""
    image: str = ""

    @property
    def full_name(self) -> str:
        """First and last name, falling back to the username."""
        name = f"{self.first_name} {self.last_name}".strip()
        return name or self.username

    @property
    def display_name(self) -> str:
        """Name used in greetings."""
        return self.first_name or self.username

    @classmethod
    def from_api(cls, data: Any) -> "UserProfile":
        """Build a profile from a camelCase payload.

        Raises ``ParseError`` when *data* is not an object or lacks
        the identifying fields.
        """
        if not isinstance(data, dict):
            raise ParseError(
                f"Profile must be an object, got {type(data).__name__}"
            )
        missing = [k for k in _REQUIRED_FIELDS if k not in data]
        if missing:
            raise ParseError(
                f"Profile is missing field(s): {', '.join(missing)}"
            )
        try:
            user_id = int(data["id"])
        except (TypeError, ValueError) as exc:
            raise ParseError(f"Invalid profile id: {data['id']!r}") from exc

        return cls(
            id=user_id,
            username=str(data["username"]),
            email=str(data.get("email") or ""),
            first_name=str(data.get("firstName") or ""),
            last_name=str(data.get("lastName") or ""),
            gender=str(data.get("gender") or ""),
            image=str(data.get("image") or ""),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialise back to the camelCase shape used on the wire."""
        return {
            "id": self.id,
            "username": self.username,
            "email": self.email,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "gender": self.gender,
            "image": self.image,
        }
