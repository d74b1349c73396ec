"""Application layer interfaces (Ports)"""

from src.service.hotel.app.interface.i_enrollment_query_repo import IEnrollmentQueryRepo
from src.service.hotel.app.interface.i_hotel_query_repo import IHotelQueryRepo
from src.service.hotel.app.interface.i_session_query_repo import ISessionQueryRepo
from src.service.hotel.app.interface.i_ticket_query_repo import ITicketQueryRepo

__all__ = [
    'IEnrollmentQueryRepo',
    'IHotelQueryRepo',
    'ISessionQueryRepo',
    'ITicketQueryRepo',
]
