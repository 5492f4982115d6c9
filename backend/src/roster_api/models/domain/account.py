"""Account domain enums."""

from enum import StrEnum


class Gender(StrEnum):
    """Gender values accepted for accounts and employees."""

    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"
