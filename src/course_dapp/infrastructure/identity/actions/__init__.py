from .users import UserActions

__all__ = ["UserActions"]
