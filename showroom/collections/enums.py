import enum


class AdminRole(str, enum.Enum):
    """
    Role carried by admin accounts and their access tokens.
    """

    ADMIN = "admin"
