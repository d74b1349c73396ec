from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.hotel.app.interface.i_enrollment_query_repo import IEnrollmentQueryRepo
from src.service.hotel.app.interface.i_ticket_query_repo import ITicketQueryRepo
from src.service.hotel.domain.entity.ticket_entity import TicketEntity


class CheckHotelEligibilityUseCase:
    """
    Gate for every hotel query.

    Order of checks:
    1. user has an enrollment (404)
    2. enrollment has a ticket (404)
    3. ticket is paid, not remote and includes hotel (402, see TicketEntity)
    """

    def __init__(
        self,
        enrollment_query_repo: IEnrollmentQueryRepo,
        ticket_query_repo: ITicketQueryRepo,
    ) -> None:
        self.enrollment_query_repo = enrollment_query_repo
        self.ticket_query_repo = ticket_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        enrollment_query_repo: IEnrollmentQueryRepo = Depends(
            Provide[Container.enrollment_query_repo]
        ),
        ticket_query_repo: ITicketQueryRepo = Depends(Provide[Container.ticket_query_repo]),
    ) -> Self:
        return cls(enrollment_query_repo=enrollment_query_repo, ticket_query_repo=ticket_query_repo)

    @Logger.io
    async def execute(self, *, user_id: int) -> TicketEntity:
        enrollment = await self.enrollment_query_repo.get_by_user_id(user_id=user_id)
        if enrollment is None or enrollment.id is None:
            raise NotFoundError('Enrollment not found')

        ticket = await self.ticket_query_repo.get_by_enrollment_id(enrollment_id=enrollment.id)
        if ticket is None:
            raise NotFoundError('Ticket not found')

        ticket.validate_hotel_access()

        Logger.base.info(f'✅ [HOTEL_ELIGIBILITY] User {user_id} cleared with ticket {ticket.id}')
        return ticket
