"""Service for finding the user a request refers to."""

from course_dapp.application.identity.protocols.user_repository import UserRepositoryProtocol
from course_dapp.domain.common.value_objects.ids import UserId
from course_dapp.domain.identity.entities.user import User


class UserLookupService:
    """Resolves a user from either a wallet address or a user ID."""

    def __init__(self, user_repository: UserRepositoryProtocol) -> None:
        self.user_repository = user_repository

    def find_user(self, user_id: object = None, address: object = None) -> User | None:
        """
        Find a user by address or ID.

        The address wins when both are given. An ID that is not a valid
        identifier simply matches nobody.
        """
        if address:
            return self.user_repository.find_by_address(str(address))
        parsed_id = UserId.parse(user_id)
        if parsed_id is None:
            return None
        return self.user_repository.find_by_id(parsed_id)
