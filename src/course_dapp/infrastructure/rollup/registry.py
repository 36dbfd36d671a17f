"""Typed registry of the actions a request can name."""

from collections.abc import Awaitable, Callable, Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, TypeAlias

from course_dapp.infrastructure.rollup.schemas import RequestType, Status

ActionData: TypeAlias = Mapping[str, Any]
ActionHandler: TypeAlias = Callable[[ActionData], Awaitable[Status]]


class ActionName(StrEnum):
    """Every action name the dApp recognizes."""

    # Users
    CREATE_USER = "create_user"
    GET_USERS = "get_users"
    GET_USER_BY_ADDRESS = "get_user_by_address"
    GET_USER_BY_ID = "get_user_by_id"
    ADD_TO_WAITLIST = "add_to_waitlist"
    ADD_TO_CART = "add_to_cart"
    REMOVE_FROM_CART = "remove_from_cart"
    REMOVE_FROM_WAITLIST = "remove_from_waitlist"
    GET_USER_WAITLIST = "get_user_waitlist"
    GET_USER_CART = "get_user_cart"
    GET_USER_ENROLLED_COURSES = "get_user_enrolled_courses"
    ENROLL_TO_COURSE = "enroll_to_course"

    # Courses
    CREATE_COURSE = "create_course"
    UPDATE_COURSE = "update_course"
    GET_COURSES = "get_courses"
    GET_LESSONS = "get_lessons"
    CREATE_LESSONS = "create_lessons"
    GET_CREATOR_COURSES = "get_creator_courses"
    GET_COURSE_BY_ID = "get_course_by_id"


@dataclass(frozen=True)
class ActionSpec:
    """
    A registered action.

    Attributes:
        name: Action name as it appears in requests
        kind: The only request type allowed to invoke the action
        handler: Coroutine function taking the action's argument object
        params: Names given to inspect path segments, in order
    """

    name: ActionName
    kind: RequestType
    handler: ActionHandler
    params: tuple[str, ...] = ()

    def bind_arguments(self, args: Sequence[str]) -> dict[str, str]:
        """
        Map inspect path segments onto parameter names.

        Extra segments are dropped; missing ones are simply absent.
        """
        return dict(zip(self.params, args, strict=False))


class ActionRegistry:
    """Lookup table from action name to its registered spec."""

    def __init__(self, specs: Iterable[ActionSpec]) -> None:
        """
        Build the registry.

        Raises:
            ValueError: If an action is registered twice or not at all
        """
        self._specs: dict[ActionName, ActionSpec] = {}
        for spec in specs:
            if spec.name in self._specs:
                raise ValueError(f"Action '{spec.name}' is registered twice")
            self._specs[spec.name] = spec

        missing = [name.value for name in ActionName if name not in self._specs]
        if missing:
            raise ValueError(f"Actions without a handler: {', '.join(missing)}")

    def resolve(self, name: str) -> ActionSpec | None:
        """Return the registered action for ``name``, or None if it does not exist."""
        try:
            action = ActionName(name)
        except ValueError:
            return None
        return self._specs[action]

    def __len__(self) -> int:
        return len(self._specs)

    def __iter__(self) -> Iterator[ActionSpec]:
        return iter(self._specs.values())
