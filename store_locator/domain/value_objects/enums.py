"""Domain enums."""

from enum import Enum


class BootstrapStatus(str, Enum):
    SEEDED = "seeded"
    SKIPPED = "skipped"
    FAILED = "failed"
