from typing import AsyncContextManager, Callable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.hotel.app.interface.i_session_query_repo import ISessionQueryRepo
from src.service.hotel.driven_adapter.model.session_model import SessionModel


class SessionQueryRepoImpl(ISessionQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def exists_by_token(self, *, token: str) -> bool:
        async with self.session_factory() as session:
            result = await session.execute(
                select(SessionModel.id).where(SessionModel.token == token).limit(1)
            )
            return result.scalar_one_or_none() is not None
