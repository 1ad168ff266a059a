from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from .errors import ArgumentRangeError
from .validation import require_digits, require_text

UID_LENGTH = 5
ARTIST_UID_PREFIX = "8"


class ParticipantType(StrEnum):
    ARTIST = "Artist"
    ATTENDEE = "Attendee"


@dataclass(frozen=True)
class Person:
    """A convention participant identified by a 5-digit uid.

    The participant type is read off the uid alone: uids starting with ``8``
    belong to artists, everything else is an attendee.
    """

    name: str
    uid: str

    def __post_init__(self) -> None:
        require_text("name", self.name)
        require_text("uid", self.uid)
        if not self.name:
            raise ArgumentRangeError("name must be non-empty", argument="name", value=self.name)
        if len(self.uid) != UID_LENGTH:
            raise ArgumentRangeError(
                f"uid must be exactly {UID_LENGTH} characters, got {self.uid!r}",
                argument="uid",
                value=self.uid,
            )
        require_digits("uid", self.uid)

    def get_type(self) -> ParticipantType:
        if self.uid.startswith(ARTIST_UID_PREFIX):
            return ParticipantType.ARTIST
        return ParticipantType.ATTENDEE
