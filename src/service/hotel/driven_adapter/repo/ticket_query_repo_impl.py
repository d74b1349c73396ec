from typing import AsyncContextManager, Callable, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.hotel.app.interface.i_ticket_query_repo import ITicketQueryRepo
from src.service.hotel.domain.entity.ticket_entity import TicketEntity, TicketTypeEntity
from src.service.hotel.driven_adapter.model.ticket_model import TicketModel, TicketTypeModel


class TicketQueryRepoImpl(ITicketQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_enrollment_id(self, *, enrollment_id: int) -> Optional[TicketEntity]:
        async with self.session_factory() as session:
            # ticket_type is joined-loaded by the relationship definition
            result = await session.execute(
                select(TicketModel)
                .where(TicketModel.enrollment_id == enrollment_id)
                .order_by(TicketModel.id)
                .limit(1)
            )
            ticket_model = result.scalars().first()

            if not ticket_model:
                return None

            return self._model_to_entity(ticket_model)

    def _model_to_entity(self, ticket_model: TicketModel) -> TicketEntity:
        return TicketEntity(
            id=ticket_model.id,
            enrollment_id=ticket_model.enrollment_id,
            status=ticket_model.status,
            ticket_type=self._ticket_type_to_entity(ticket_model.ticket_type),
            created_at=ticket_model.created_at,
            updated_at=ticket_model.updated_at,
        )

    @staticmethod
    def _ticket_type_to_entity(ticket_type_model: TicketTypeModel) -> TicketTypeEntity:
        return TicketTypeEntity(
            id=ticket_type_model.id,
            name=ticket_type_model.name,
            price=ticket_type_model.price,
            is_remote=ticket_type_model.is_remote,
            includes_hotel=ticket_type_model.includes_hotel,
            created_at=ticket_type_model.created_at,
            updated_at=ticket_type_model.updated_at,
        )
