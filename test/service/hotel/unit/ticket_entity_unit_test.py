import pytest

from src.platform.exception.exceptions import PaymentRequiredError
from src.service.hotel.domain.enum.ticket_status import TicketStatus
from test.constants import MISSING_PAYMENT, TICKET_TYPE_REMOTE, TICKET_WITHOUT_HOTEL
from test.service.hotel.in_memory_repos import build_ticket


@pytest.mark.unit
class TestTicketHotelAccess:
    def test_paid_in_person_ticket_with_hotel_passes(self):
        ticket = build_ticket(status=TicketStatus.PAID, is_remote=False, includes_hotel=True)

        ticket.validate_hotel_access()

    @pytest.mark.parametrize(
        ('ticket_kwargs', 'expected_message'),
        [
            ({'status': TicketStatus.RESERVED}, MISSING_PAYMENT),
            ({'is_remote': True}, TICKET_TYPE_REMOTE),
            ({'includes_hotel': False}, TICKET_WITHOUT_HOTEL),
        ],
    )
    def test_single_violation(self, ticket_kwargs: dict, expected_message: str):
        ticket = build_ticket(**ticket_kwargs)

        with pytest.raises(PaymentRequiredError) as exc_info:
            ticket.validate_hotel_access()

        assert exc_info.value.message == expected_message
        assert exc_info.value.status_code == 402

    @pytest.mark.parametrize(
        ('ticket_kwargs', 'expected_message'),
        [
            (
                {'status': TicketStatus.RESERVED, 'is_remote': True, 'includes_hotel': False},
                MISSING_PAYMENT,
            ),
            ({'status': TicketStatus.RESERVED, 'includes_hotel': False}, MISSING_PAYMENT),
            ({'is_remote': True, 'includes_hotel': False}, TICKET_TYPE_REMOTE),
        ],
    )
    def test_multiple_violations_report_first_in_order(
        self, ticket_kwargs: dict, expected_message: str
    ):
        ticket = build_ticket(**ticket_kwargs)

        with pytest.raises(PaymentRequiredError) as exc_info:
            ticket.validate_hotel_access()

        assert exc_info.value.message == expected_message

    def test_ticket_type_id_follows_ticket_type(self):
        ticket = build_ticket()

        assert ticket.ticket_type_id == ticket.ticket_type.id

    @pytest.mark.parametrize('status', ['CANCELLED', 'paid', ''])
    def test_status_outside_known_values_is_unpaid(self, status: str):
        ticket = build_ticket(status=status)

        with pytest.raises(PaymentRequiredError) as exc_info:
            ticket.validate_hotel_access()

        assert exc_info.value.message == MISSING_PAYMENT
