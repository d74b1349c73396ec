"""
In-memory repositories and entity builders for hotel tests.

Stubs implement the real repository interfaces so use cases and the HTTP
layer run unchanged; only storage is swapped.
"""

from datetime import date, datetime, timezone
from typing import List, Optional

from src.service.hotel.app.interface.i_enrollment_query_repo import IEnrollmentQueryRepo
from src.service.hotel.app.interface.i_hotel_query_repo import IHotelQueryRepo
from src.service.hotel.app.interface.i_session_query_repo import ISessionQueryRepo
from src.service.hotel.app.interface.i_ticket_query_repo import ITicketQueryRepo
from src.service.hotel.domain.entity.enrollment_entity import EnrollmentEntity
from src.service.hotel.domain.entity.hotel_entity import HotelEntity, RoomEntity
from src.service.hotel.domain.entity.ticket_entity import TicketEntity, TicketTypeEntity
from src.service.hotel.domain.enum.ticket_status import TicketStatus
from test.constants import (
    DEFAULT_ENROLLMENT_ID,
    DEFAULT_HOTEL_IMAGE,
    DEFAULT_HOTEL_NAME,
    DEFAULT_ROOM_CAPACITY,
    DEFAULT_TICKET_ID,
)


FIXED_TIME = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


# =============================================================================
# Entity builders
# =============================================================================


def build_enrollment(*, user_id: int, enrollment_id: int = DEFAULT_ENROLLMENT_ID) -> EnrollmentEntity:
    return EnrollmentEntity(
        id=enrollment_id,
        user_id=user_id,
        name='Test Attendee',
        cpf='12345678901',
        birthday=date(1990, 5, 17),
        phone='(21) 98999-9999',
        created_at=FIXED_TIME,
        updated_at=FIXED_TIME,
    )


def build_ticket_type(*, is_remote: bool = False, includes_hotel: bool = True) -> TicketTypeEntity:
    return TicketTypeEntity(
        id=1,
        name='Remote' if is_remote else 'In person',
        price=250 if includes_hotel else 100,
        is_remote=is_remote,
        includes_hotel=includes_hotel,
        created_at=FIXED_TIME,
        updated_at=FIXED_TIME,
    )


def build_ticket(
    *,
    enrollment_id: int = DEFAULT_ENROLLMENT_ID,
    status: str = TicketStatus.PAID,
    is_remote: bool = False,
    includes_hotel: bool = True,
) -> TicketEntity:
    return TicketEntity(
        id=DEFAULT_TICKET_ID,
        enrollment_id=enrollment_id,
        status=status,
        ticket_type=build_ticket_type(is_remote=is_remote, includes_hotel=includes_hotel),
        created_at=FIXED_TIME,
        updated_at=FIXED_TIME,
    )


def build_hotel(*, hotel_id: int = 1, room_count: int = 0) -> HotelEntity:
    return HotelEntity(
        id=hotel_id,
        name=f'{DEFAULT_HOTEL_NAME} {hotel_id}',
        image=DEFAULT_HOTEL_IMAGE,
        created_at=FIXED_TIME,
        updated_at=FIXED_TIME,
        rooms=[
            RoomEntity(
                id=hotel_id * 100 + index,
                name=f'{hotel_id}{index:02d}',
                capacity=DEFAULT_ROOM_CAPACITY,
                hotel_id=hotel_id,
                created_at=FIXED_TIME,
                updated_at=FIXED_TIME,
            )
            for index in range(1, room_count + 1)
        ],
    )


# =============================================================================
# Repositories
# =============================================================================


class InMemoryEnrollmentQueryRepo(IEnrollmentQueryRepo):
    def __init__(self) -> None:
        self.enrollments: List[EnrollmentEntity] = []

    async def get_by_user_id(self, *, user_id: int) -> Optional[EnrollmentEntity]:
        return next((e for e in self.enrollments if e.user_id == user_id), None)


class InMemoryTicketQueryRepo(ITicketQueryRepo):
    def __init__(self) -> None:
        self.tickets: List[TicketEntity] = []

    async def get_by_enrollment_id(self, *, enrollment_id: int) -> Optional[TicketEntity]:
        return next((t for t in self.tickets if t.enrollment_id == enrollment_id), None)


class InMemoryHotelQueryRepo(IHotelQueryRepo):
    def __init__(self) -> None:
        self.hotels: List[HotelEntity] = []
        self.error: Optional[Exception] = None

    async def list_hotels(self) -> List[HotelEntity]:
        if self.error:
            raise self.error
        return [
            HotelEntity(
                id=hotel.id,
                name=hotel.name,
                image=hotel.image,
                created_at=hotel.created_at,
                updated_at=hotel.updated_at,
            )
            for hotel in self.hotels
        ]

    async def get_hotel_with_rooms(self, *, hotel_id: int) -> Optional[HotelEntity]:
        if self.error:
            raise self.error
        return next((h for h in self.hotels if h.id == hotel_id), None)


class InMemorySessionQueryRepo(ISessionQueryRepo):
    def __init__(self) -> None:
        self.tokens: set[str] = set()

    async def exists_by_token(self, *, token: str) -> bool:
        return token in self.tokens


class InMemoryRepos:
    """Bundle of stub repositories sharing one test's data."""

    def __init__(self) -> None:
        self.enrollment = InMemoryEnrollmentQueryRepo()
        self.ticket = InMemoryTicketQueryRepo()
        self.hotel = InMemoryHotelQueryRepo()
        self.session = InMemorySessionQueryRepo()

    def enroll_with_ticket(
        self,
        *,
        user_id: int,
        status: str = TicketStatus.PAID,
        is_remote: bool = False,
        includes_hotel: bool = True,
    ) -> TicketEntity:
        enrollment = build_enrollment(user_id=user_id)
        self.enrollment.enrollments.append(enrollment)
        ticket = build_ticket(
            enrollment_id=DEFAULT_ENROLLMENT_ID,
            status=status,
            is_remote=is_remote,
            includes_hotel=includes_hotel,
        )
        self.ticket.tickets.append(ticket)
        return ticket
