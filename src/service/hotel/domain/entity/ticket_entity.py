from datetime import datetime
from typing import Optional

import attrs

from src.platform.exception.exceptions import PaymentRequiredError
from src.service.hotel.domain.enum.ticket_status import TicketStatus


@attrs.define
class TicketTypeEntity:
    name: str
    price: int
    is_remote: bool
    includes_hotel: bool
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@attrs.define
class TicketEntity:
    enrollment_id: int
    ticket_type: TicketTypeEntity
    status: str  # raw stored value; anything but PAID is unpaid
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def ticket_type_id(self) -> Optional[int]:
        return self.ticket_type.id

    def validate_hotel_access(self) -> None:
        """
        Ensure the ticket grants access to hotel listings.

        Checks run in a fixed order so a ticket breaking several rules
        always reports the same reason.
        """
        if self.status != TicketStatus.PAID:
            raise PaymentRequiredError('Missing Payment')

        if self.ticket_type.is_remote:
            raise PaymentRequiredError('Ticket type is remote')

        if not self.ticket_type.includes_hotel:
            raise PaymentRequiredError('Ticket Does Not Include Hotel')
