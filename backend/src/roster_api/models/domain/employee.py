"""Employee domain enums."""

from enum import StrEnum


class EmployeeRole(StrEnum):
    """Employee job role."""

    DEVELOPER = "Developer"
    TESTER = "Tester"
    DESIGNER = "Designer"
