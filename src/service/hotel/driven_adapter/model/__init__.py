"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.hotel.driven_adapter.model.enrollment_model import EnrollmentModel
from src.service.hotel.driven_adapter.model.hotel_model import HotelModel, RoomModel
from src.service.hotel.driven_adapter.model.session_model import SessionModel
from src.service.hotel.driven_adapter.model.ticket_model import TicketModel, TicketTypeModel
from src.service.hotel.driven_adapter.model.user_model import UserModel

__all__ = [
    'EnrollmentModel',
    'HotelModel',
    'RoomModel',
    'SessionModel',
    'TicketModel',
    'TicketTypeModel',
    'UserModel',
]
