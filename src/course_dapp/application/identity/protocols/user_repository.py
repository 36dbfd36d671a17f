from typing import Protocol

from course_dapp.domain.common.value_objects.ids import UserId
from course_dapp.domain.identity.entities.user import User


class UserRepositoryProtocol(Protocol):
    def find_by_id(self, user_id: UserId) -> User | None: ...

    def find_by_address(self, address: str) -> User | None: ...

    def find_all(self) -> list[User]: ...

    def save(self, user: User) -> User: ...
