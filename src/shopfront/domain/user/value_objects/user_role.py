from enum import Enum


class UserRole(str, Enum):
    """User roles (shoppers and shop administrators)."""

    CUSTOMER = "CUSTOMER"
    ADMIN = "ADMIN"
