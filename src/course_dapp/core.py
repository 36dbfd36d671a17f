import httpx
from dependency_injector import containers, providers

from course_dapp.application.catalog.use_cases.course_use_case import CourseUseCase
from course_dapp.application.catalog.use_cases.lesson_use_case import LessonUseCase
from course_dapp.application.identity.services.user_lookup_service import UserLookupService
from course_dapp.application.identity.use_cases.user_courses_use_case import UserCoursesUseCase
from course_dapp.application.identity.use_cases.user_use_case import UserUseCase
from course_dapp.config import Settings
from course_dapp.infrastructure.catalog.actions.courses import CourseActions
from course_dapp.infrastructure.catalog.repositories import CourseRepository, LessonRepository
from course_dapp.infrastructure.identity.actions.users import UserActions
from course_dapp.infrastructure.identity.repositories import UserRepository
from course_dapp.infrastructure.rollup.client import RollupClient
from course_dapp.infrastructure.rollup.dispatcher import RollupDispatcher
from course_dapp.infrastructure.rollup.routes import build_action_registry
from course_dapp.infrastructure.rollup.state_handler import RollupStateHandler


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    settings = providers.Dependency(instance_of=Settings)

    # Optional transport override (tests mount a fake rollup server here)
    transport = providers.Object(None)

    # Repositories: the in-memory store, one instance per container
    user_repository = providers.Singleton(UserRepository)
    course_repository = providers.Singleton(CourseRepository)
    lesson_repository = providers.Singleton(LessonRepository)

    # Application services
    user_lookup_service = providers.Factory(UserLookupService, user_repository=user_repository)

    # Identity use cases
    user_use_case = providers.Factory(
        UserUseCase,
        user_repository=user_repository,
        user_lookup_service=user_lookup_service,
    )
    user_courses_use_case = providers.Factory(
        UserCoursesUseCase,
        user_lookup_service=user_lookup_service,
        course_repository=course_repository,
    )

    # Catalog use cases
    course_use_case = providers.Factory(
        CourseUseCase,
        course_repository=course_repository,
        user_lookup_service=user_lookup_service,
    )
    lesson_use_case = providers.Factory(
        LessonUseCase,
        course_repository=course_repository,
        lesson_repository=lesson_repository,
        user_lookup_service=user_lookup_service,
    )

    # Rollup integration
    rollup_client = providers.Singleton(
        RollupClient,
        base_url=settings.provided.ROLLUP_HTTP_SERVER_URL,
        timeout=settings.provided.ROLLUP_HTTP_TIMEOUT,
        transport=transport,
    )
    state_handler = providers.Singleton(RollupStateHandler, client=rollup_client)

    user_actions = providers.Singleton(
        UserActions,
        state_handler=state_handler,
        user_use_case=user_use_case,
        user_courses_use_case=user_courses_use_case,
    )
    course_actions = providers.Singleton(
        CourseActions,
        state_handler=state_handler,
        course_use_case=course_use_case,
        lesson_use_case=lesson_use_case,
    )
    action_registry = providers.Singleton(
        build_action_registry,
        users=user_actions,
        courses=course_actions,
    )

    dispatcher = providers.Singleton(
        RollupDispatcher,
        client=rollup_client,
        state_handler=state_handler,
        registry=action_registry,
        retry_delay=settings.provided.FINISH_RETRY_DELAY_SECONDS,
    )


def create_container(
    settings: Settings, transport: httpx.AsyncBaseTransport | None = None
) -> Container:
    """
    Build a container with its own, empty in-memory store.

    Args:
        settings: Application settings
        transport: Optional httpx transport used instead of the network
    """
    container = Container(settings=providers.Object(settings))
    if transport is not None:
        container.transport.override(providers.Object(transport))
    return container
