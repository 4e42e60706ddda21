"""Dependency injection container.

リポジトリ・イベント発行・サービス・ユースケースをサブコンテナに分けて組み立てる。
1つのコンテナが1つの選挙（レジストリインスタンス）に対応する。
"""

from dependency_injector import containers, providers

from voting_registry.application.services.election_state_service import (
    ElectionStateService,
)
from voting_registry.application.usecases.cast_vote_usecase import CastVoteUseCase
from voting_registry.application.usecases.manage_proposals_usecase import (
    ManageProposalsUseCase,
)
from voting_registry.application.usecases.manage_voters_usecase import (
    ManageVotersUseCase,
)
from voting_registry.application.usecases.manage_workflow_usecase import (
    ManageWorkflowUseCase,
)
from voting_registry.common.logging import get_logger
from voting_registry.domain.services.interfaces.event_publisher import (
    IEventPublisher,
)
from voting_registry.domain.services.tally_domain_service import TallyDomainService
from voting_registry.infrastructure.config.settings import Settings, get_settings
from voting_registry.infrastructure.events.event_publishers import (
    CompositeEventPublisher,
    InMemoryEventPublisher,
    StructlogEventPublisher,
)
from voting_registry.infrastructure.persistence.in_memory_election_repository import (
    InMemoryElectionRepository,
)


logger = get_logger(__name__)


def _build_event_publisher(
    recorder: InMemoryEventPublisher, publish_to_log: bool
) -> IEventPublisher:
    publishers: list[IEventPublisher] = [recorder]
    if publish_to_log:
        publishers.append(StructlogEventPublisher())
    return CompositeEventPublisher(publishers)


class RepositoryContainer(containers.DeclarativeContainer):
    """Repository providers."""

    election_repository = providers.Singleton(InMemoryElectionRepository)


class EventContainer(containers.DeclarativeContainer):
    """Event publisher providers."""

    config = providers.Configuration()

    event_recorder = providers.Singleton(InMemoryEventPublisher)
    event_publisher = providers.Singleton(
        _build_event_publisher,
        recorder=event_recorder,
        publish_to_log=config.publish_events_to_log,
    )


class ServiceContainer(containers.DeclarativeContainer):
    """Application/domain service providers."""

    repositories = providers.DependenciesContainer()
    events = providers.DependenciesContainer()

    tally_service = providers.Singleton(TallyDomainService)
    election_state_service = providers.Singleton(
        ElectionStateService,
        election_repository=repositories.election_repository,
        event_publisher=events.event_publisher,
    )


class UseCaseContainer(containers.DeclarativeContainer):
    """Use case providers."""

    services = providers.DependenciesContainer()

    manage_voters_usecase = providers.Factory(
        ManageVotersUseCase,
        election_state_service=services.election_state_service,
    )
    manage_proposals_usecase = providers.Factory(
        ManageProposalsUseCase,
        election_state_service=services.election_state_service,
    )
    cast_vote_usecase = providers.Factory(
        CastVoteUseCase,
        election_state_service=services.election_state_service,
    )
    manage_workflow_usecase = providers.Factory(
        ManageWorkflowUseCase,
        election_state_service=services.election_state_service,
        tally_service=services.tally_service,
    )


class Container(containers.DeclarativeContainer):
    """Application container."""

    config = providers.Configuration()

    repositories = providers.Container(RepositoryContainer)
    events = providers.Container(EventContainer, config=config)
    services = providers.Container(
        ServiceContainer,
        repositories=repositories,
        events=events,
    )
    use_cases = providers.Container(UseCaseContainer, services=services)


_container: Container | None = None


def init_container(app_settings: Settings | None = None) -> Container:
    """新しいコンテナを生成してモジュールのコンテナとして登録する.

    Args:
        app_settings: 使用する設定（省略時は ``get_settings()``）

    Returns:
        初期化済みのコンテナ
    """
    global _container

    app_settings = app_settings or get_settings()
    container = Container()
    container.config.from_dict(app_settings.model_dump())
    _container = container
    logger.debug("Container initialized", admin_address=app_settings.admin_address)
    return container


def get_container() -> Container:
    """初期化済みのコンテナを取得する.

    Raises:
        RuntimeError: コンテナが未初期化の場合
    """
    if _container is None:
        raise RuntimeError("Container is not initialized. Call init_container().")
    return _container


def reset_container() -> None:
    """モジュールのコンテナを破棄する."""
    global _container
    _container = None
