"""Use case for registering and looking up users."""

import structlog

from course_dapp.application.common.result import Failure, Result, Success
from course_dapp.application.identity.protocols.user_repository import UserRepositoryProtocol
from course_dapp.application.identity.services.user_lookup_service import UserLookupService
from course_dapp.domain.common.exceptions import ValidationError
from course_dapp.domain.identity.entities.user import User

logger = structlog.get_logger(__name__)


class UserUseCase:
    """Use case for user registration and queries."""

    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        user_lookup_service: UserLookupService,
    ) -> None:
        """Initialize use case with dependencies."""
        self.user_repository = user_repository
        self.user_lookup_service = user_lookup_service

    def create_user(self, address: object) -> Result[User, str]:
        """
        Register a new user.

        Addresses are not required to be unique; registering the same
        address twice yields two users.

        Args:
            address: Wallet address of the user

        Returns:
            Success with the created user, or Failure with an error message
        """
        if not address or not isinstance(address, str):
            return Failure("User address is required.")

        try:
            user = User.create(address=address)
        except ValidationError as e:
            return Failure(e.message)

        user = self.user_repository.save(user)
        logger.info("user_created", user_id=str(user.id), address=address)
        return Success(user)

    def get_users(self) -> Result[list[User], str]:
        return Success(self.user_repository.find_all())

    def get_user_by_address(self, address: object) -> Result[User, str]:
        user = self.user_lookup_service.find_user(address=address) if address else None
        if not user:
            return Failure(f"User with address '{address}' not found.")
        return Success(user)

    def get_user_by_id(self, user_id: object) -> Result[User, str]:
        user = self.user_lookup_service.find_user(user_id=user_id)
        if not user:
            return Failure(f"User with ID '{user_id}' not found.")
        return Success(user)
