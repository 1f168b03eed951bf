"""Privilege level enumeration."""

from enum import Enum


class PrivilegeLevel(str, Enum):
    """Privilege the current process runs with."""

    ROOT = "root"
    USER = "user"
