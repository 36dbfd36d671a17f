"""Action table: which handler serves each action name."""

from course_dapp.infrastructure.catalog.actions.courses import CourseActions
from course_dapp.infrastructure.identity.actions.users import UserActions
from course_dapp.infrastructure.rollup.registry import ActionName, ActionRegistry, ActionSpec
from course_dapp.infrastructure.rollup.schemas import RequestType

ADVANCE = RequestType.ADVANCE_STATE
INSPECT = RequestType.INSPECT_STATE


def build_action_registry(users: UserActions, courses: CourseActions) -> ActionRegistry:
    """Register every action with its request type and inspect parameters."""
    return ActionRegistry(
        [
            # User actions
            ActionSpec(ActionName.CREATE_USER, ADVANCE, users.create_user),
            ActionSpec(ActionName.GET_USERS, INSPECT, users.get_users),
            ActionSpec(
                ActionName.GET_USER_BY_ADDRESS, INSPECT, users.get_user_by_address, ("address",)
            ),
            ActionSpec(ActionName.GET_USER_BY_ID, INSPECT, users.get_user_by_id, ("id",)),
            ActionSpec(ActionName.ADD_TO_WAITLIST, ADVANCE, users.add_to_waitlist),
            ActionSpec(ActionName.ADD_TO_CART, ADVANCE, users.add_to_cart),
            ActionSpec(ActionName.REMOVE_FROM_CART, ADVANCE, users.remove_from_cart),
            ActionSpec(ActionName.REMOVE_FROM_WAITLIST, ADVANCE, users.remove_from_waitlist),
            ActionSpec(ActionName.GET_USER_WAITLIST, INSPECT, users.get_user_waitlist, ("id",)),
            ActionSpec(ActionName.GET_USER_CART, INSPECT, users.get_user_cart, ("id",)),
            ActionSpec(
                ActionName.GET_USER_ENROLLED_COURSES,
                INSPECT,
                users.get_user_enrolled_courses,
                ("id",),
            ),
            ActionSpec(ActionName.ENROLL_TO_COURSE, ADVANCE, users.enroll_to_course),
            # Course actions
            ActionSpec(ActionName.CREATE_COURSE, ADVANCE, courses.create_course),
            ActionSpec(ActionName.UPDATE_COURSE, ADVANCE, courses.update_course),
            ActionSpec(ActionName.GET_COURSES, INSPECT, courses.get_courses),
            ActionSpec(ActionName.GET_LESSONS, INSPECT, courses.get_lessons, ("course_id",)),
            ActionSpec(ActionName.CREATE_LESSONS, ADVANCE, courses.create_lessons),
            ActionSpec(
                ActionName.GET_CREATOR_COURSES,
                INSPECT,
                courses.get_creator_courses,
                ("creator_id",),
            ),
            ActionSpec(ActionName.GET_COURSE_BY_ID, INSPECT, courses.get_course_by_id, ("id",)),
        ]
    )
