"""Mapper for User domain → wire conversion."""

from course_dapp.domain.identity.entities.user import User
from course_dapp.infrastructure.common.time_utils import to_epoch_millis
from course_dapp.infrastructure.identity.schemas.user_schemas import UserResponse


class UserMapper:
    """Mapper for User domain → wire conversion."""

    def to_schema(self, user: User) -> UserResponse:
        return UserResponse(
            id=str(user.id),
            address=user.address,
            created_at=to_epoch_millis(user.created_at),
        )

    def to_schema_list(self, users: list[User]) -> list[UserResponse]:
        return [self.to_schema(user) for user in users]
