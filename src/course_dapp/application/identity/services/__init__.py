from .user_lookup_service import UserLookupService

__all__ = ["UserLookupService"]
