from .account_role import AccountRole

__all__ = ["AccountRole"]
