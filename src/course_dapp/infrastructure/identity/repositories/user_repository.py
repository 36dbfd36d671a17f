"""Repository for User domain entities."""

from course_dapp.domain.common.value_objects.ids import UserId
from course_dapp.domain.identity.entities.user import User
from course_dapp.infrastructure.common.repositories.in_memory_repository import (
    InMemoryRepository,
)


class UserRepository(InMemoryRepository[UserId, User]):
    """Repository for User domain entities."""

    def find_by_address(self, address: str) -> User | None:
        """
        Find the first user registered with an address.

        Linear scan in registration order; addresses are not indexed.

        Args:
            address: The wallet address

        Returns:
            User entity if found, None otherwise
        """
        for user in self._items.values():
            if user.address == address:
                return user
        return None
