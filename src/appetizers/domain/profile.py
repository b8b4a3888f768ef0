"""User profile domain model."""

from dataclasses import dataclass, field
from datetime import date


@dataclass
class UserProfile:
    """Profile edited on the account form."""

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    birth_date: date = field(default_factory=date.today)
    extra_napkins: bool = False
    frequent_refills: bool = False
