"""
Dishka DI Container Setup.

- Registers all dependencies (engine, session, repositories, handlers)
- Maps abstract repository ports to SQLAlchemy implementations
- Manages lifecycle: Scope.APP = singleton, Scope.REQUEST = per HTTP request

Flow:
  Container → provides → SqlAlchemyRoomRepository → to → CreateRoomHandler
                                    ↓
                            uses RoomRepository interface
"""

from typing import AsyncIterable, Optional

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from chatroom.application.commands.chat import SendChatHandler
from chatroom.application.commands.rooms import CreateRoomHandler
from chatroom.application.queries.chat import FindChatListHandler
from chatroom.application.queries.rooms import FindRoomListHandler
from chatroom.config.settings import Config
from chatroom.domain.ports.repositories import ChatRepository, RoomRepository
from chatroom.infrastructure.persistence import (
    SqlAlchemyChatRepository,
    SqlAlchemyRoomRepository,
)
from chatroom.infrastructure.persistence.database import (
    create_engine,
    create_session_maker,
)


class AppProvider(Provider):
    """
    Application dependency provider.

    `database_url` defaults to Config.DATABASE_URL; tests pass their own.
    """

    def __init__(self, database_url: Optional[str] = None, echo: Optional[bool] = None):
        super().__init__()
        self._database_url = database_url or Config.DATABASE_URL
        self._echo = Config.DATABASE_ECHO if echo is None else echo

    # ==================== DATABASE ====================

    @provide(scope=Scope.APP)
    async def get_engine(self) -> AsyncIterable[AsyncEngine]:
        """Created once, disposed when the container closes."""
        engine = create_engine(self._database_url, echo=self._echo)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_maker(self, engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
        return create_session_maker(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_maker: async_sessionmaker[AsyncSession]
    ) -> AsyncIterable[AsyncSession]:
        async with session_maker() as session:
            yield session

    # ==================== REPOSITORIES ====================

    @provide(scope=Scope.REQUEST)
    def get_room_repository(self, session: AsyncSession) -> RoomRepository:
        """
        - Return type is ABSTRACT (RoomRepository)
        - Implementation is CONCRETE (SqlAlchemyRoomRepository)
        """
        return SqlAlchemyRoomRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_chat_repository(self, session: AsyncSession) -> ChatRepository:
        return SqlAlchemyChatRepository(session)

    # ==================== HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_create_room_handler(
        self, room_repository: RoomRepository
    ) -> CreateRoomHandler:
        return CreateRoomHandler(room_repository)

    @provide(scope=Scope.REQUEST)
    def get_find_room_list_handler(
        self, room_repository: RoomRepository
    ) -> FindRoomListHandler:
        return FindRoomListHandler(room_repository)

    @provide(scope=Scope.REQUEST)
    def get_find_chat_list_handler(
        self,
        room_repository: RoomRepository,
        chat_repository: ChatRepository,
    ) -> FindChatListHandler:
        return FindChatListHandler(
            room_repo=room_repository,
            chat_repo=chat_repository,
        )

    @provide(scope=Scope.REQUEST)
    def get_send_chat_handler(
        self,
        room_repository: RoomRepository,
        chat_repository: ChatRepository,
    ) -> SendChatHandler:
        return SendChatHandler(
            room_repo=room_repository,
            chat_repo=chat_repository,
        )


def create_container(database_url: Optional[str] = None) -> AsyncContainer:
    """
    Create and configure the DI container.

    Call this ONCE per application instance.
    """
    return make_async_container(AppProvider(database_url=database_url))
