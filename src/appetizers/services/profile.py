"""Profile persistence with form validation."""

import logging
import re
from dataclasses import dataclass, field, replace
from datetime import date
from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from appetizers.domain.alerts import PROFILE_SAVED, AlertItem, alert_for
from appetizers.domain.errors import ErrorKind, ProfileError
from appetizers.domain.profile import UserProfile

DEFAULT_STORAGE_KEY = "user"

_EMAIL_PATTERN = re.compile(r"[A-Z0-9a-z._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,64}")

_logger = logging.getLogger(__name__)


class ProfileStorage(Protocol):
    """Key-value storage holding serialized blobs."""

    def read(self, key: str) -> bytes | None:
        """Return the blob stored under the key, if any."""

    def write(self, key: str, blob: bytes) -> None:
        """Overwrite the blob stored under the key."""


class ProfileRecord(BaseModel):
    """Serialized shape of a user profile."""

    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    email: str
    birth_date: date = Field(alias="birthDate")
    extra_napkins: bool = Field(alias="extraNapkins")
    frequent_refills: bool = Field(alias="frequentRefills")

    @classmethod
    def from_profile(cls, profile: UserProfile) -> "ProfileRecord":
        return cls(
            first_name=profile.first_name,
            last_name=profile.last_name,
            email=profile.email,
            birth_date=profile.birth_date,
            extra_napkins=profile.extra_napkins,
            frequent_refills=profile.frequent_refills,
        )

    def to_profile(self) -> UserProfile:
        return UserProfile(
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
            birth_date=self.birth_date,
            extra_napkins=self.extra_napkins,
            frequent_refills=self.frequent_refills,
        )


def is_valid_email(email: str) -> bool:
    """Return True for a basic local-part@domain.tld address."""
    return _EMAIL_PATTERN.fullmatch(email) is not None


def validate_profile(profile: UserProfile) -> None:
    """Raise ProfileError when the profile cannot be saved."""
    if not profile.first_name or not profile.last_name or not profile.email:
        raise ProfileError(ErrorKind.INVALID_FORM)
    if not is_valid_email(profile.email):
        raise ProfileError(ErrorKind.INVALID_EMAIL, profile.email)


def encode_profile(profile: UserProfile) -> bytes:
    """Serialize a profile to its JSON blob."""
    try:
        record = ProfileRecord.from_profile(profile)
        return record.model_dump_json(by_alias=True).encode("utf-8")
    except (ValueError, TypeError) as exc:
        raise ProfileError(ErrorKind.ENCODE_FAILURE, str(exc)) from exc


def decode_profile(blob: bytes) -> UserProfile:
    """Deserialize a profile blob."""
    try:
        return ProfileRecord.model_validate_json(blob).to_profile()
    except ValidationError as exc:
        raise ProfileError(ErrorKind.CORRUPT_DATA, str(exc)) from exc


@dataclass
class ProfileStore:
    """Owns the editable profile and its single persisted blob."""

    storage: ProfileStorage
    storage_key: str = DEFAULT_STORAGE_KEY
    profile: UserProfile = field(default_factory=UserProfile)
    alert: AlertItem | None = None

    def load(self) -> bool:
        """Load the persisted profile; False when absent or corrupt."""
        blob = self.storage.read(self.storage_key)
        if blob is None:
            return False
        try:
            self.profile = decode_profile(blob)
        except ProfileError as exc:
            _logger.warning("Stored profile is unreadable: %s", exc.kind)
            self.alert = alert_for(exc.kind)
            return False
        return True

    def save(self, profile: UserProfile | None = None) -> bool:
        """Validate and persist the profile, replacing the stored blob."""
        target = profile if profile is not None else self.profile
        try:
            validate_profile(target)
            blob = encode_profile(target)
        except ProfileError as exc:
            _logger.info("Profile not saved: %s", exc.kind)
            self.alert = alert_for(exc.kind)
            return False
        self.storage.write(self.storage_key, blob)
        self.profile = replace(target)
        self.alert = PROFILE_SAVED
        return True

    def reset_form(self) -> None:
        """Reset the in-memory profile to empty defaults."""
        self.profile = UserProfile()

    def dismiss_alert(self) -> None:
        self.alert = None
