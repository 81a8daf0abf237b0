"""Global enums — must match DB CHECK constraints exactly."""

from enum import Enum


class ProfileType(str, Enum):
    CLIENT = "client"
    CONTRACTOR = "contractor"
    ADMIN = "admin"


class ContractStatus(str, Enum):
    NEW = "new"
    IN_PROGRESS = "in_progress"
    TERMINATED = "terminated"
