"""Domain value objects for ComiCraft.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules.
"""

import base64
import binascii
import re
from enum import Enum, IntEnum
from typing import ClassVar

from pydantic import Field, field_validator

from comicraft.domain.value.common import RootValueObject, ValueObject
from comicraft.domain.value.identifiers import UserId

# Characters a community name may not contain
_FORBIDDEN_NAME_CHARS = re.compile(r"[ `!@#$%^&*()_+\-=\[\]{};':\"\\|,.<>/?~]")

_DATA_URL = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+);base64,(?P<payload>.*)$", re.S)


class PrivacyType(str, Enum):
    """Community privacy mode.

    - public: anyone can view, post and comment
    - restricted: anyone can view, only members can post
    - private: only members can view and post
    """

    PUBLIC = "public"
    RESTRICTED = "restricted"
    PRIVATE = "private"

    @property
    def members_only_posting(self) -> bool:
        return self in (PrivacyType.RESTRICTED, PrivacyType.PRIVATE)

    @property
    def members_only_viewing(self) -> bool:
        return self is PrivacyType.PRIVATE


class VoteValue(IntEnum):
    """Signed value of a single vote."""

    UP = 1
    DOWN = -1


class CommunityName(RootValueObject[str]):
    """Community name.

    3-21 characters, no spaces or punctuation. Capitalization is kept:
    'Comics' and 'comics' are different communities.
    """

    MIN_LENGTH: ClassVar[int] = 3
    MAX_LENGTH: ClassVar[int] = 21

    @field_validator("root")
    @classmethod
    def validate_community_name(cls, v: str) -> str:
        """Validate community name format."""
        if _FORBIDDEN_NAME_CHARS.search(v) or not (
            cls.MIN_LENGTH <= len(v) <= cls.MAX_LENGTH
        ):
            raise ValueError(
                f"Community name should be at least {cls.MIN_LENGTH}-{cls.MAX_LENGTH} "
                "characters long and should not contain special characters."
            )
        return v


class CurrentUser(ValueObject):
    """Authenticated identity provided by the external auth provider."""

    user_id: UserId
    email: str = Field(min_length=3)

    @property
    def display_name(self) -> str:
        """Name shown on posts: the local part of the email."""
        return self.email.split("@")[0]


class ImageData(ValueObject):
    """Raw image bytes and MIME type, ready for upload."""

    content: bytes = Field(min_length=1)
    content_type: str = "image/jpeg"

    @field_validator("content_type")
    @classmethod
    def validate_content_type(cls, v: str) -> str:
        """Only image MIME types are accepted."""
        if not v.startswith("image/"):
            raise ValueError(f"Unsupported content type: {v}")
        return v

    @classmethod
    def from_data_url(cls, data_url: str) -> "ImageData":
        """Decode a base64 data URL ('data:image/png;base64,...').

        Raises:
            ValueError: If the string is not a base64 data URL
        """
        match = _DATA_URL.match(data_url.strip())
        if not match:
            raise ValueError("Image must be a base64 data URL")
        try:
            content = base64.b64decode(match.group("payload"), validate=True)
        except (binascii.Error, ValueError):
            raise ValueError("Image data is not valid base64")
        return cls(content=content, content_type=match.group("mime"))
