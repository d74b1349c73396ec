from abc import ABC, abstractmethod
from typing import Optional

from src.service.hotel.domain.entity.ticket_entity import TicketEntity


class ITicketQueryRepo(ABC):
    @abstractmethod
    async def get_by_enrollment_id(self, *, enrollment_id: int) -> Optional[TicketEntity]:
        """Get the enrollment's ticket with its ticket type loaded."""
        pass
