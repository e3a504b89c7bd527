# Roles given to a user created without any
DEFAULT_ROLES: tuple[str, ...] = ("Employee",)
