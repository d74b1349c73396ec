# Test Constants

DEFAULT_USER_ID = 1
OTHER_USER_ID = 2
DEFAULT_ENROLLMENT_ID = 10
DEFAULT_TICKET_ID = 100

DEFAULT_HOTEL_NAME = 'Driven Resort'
DEFAULT_HOTEL_IMAGE = 'https://example.com/driven-resort.png'
DEFAULT_ROOM_CAPACITY = 4

# Payment required reasons, in pipeline order
MISSING_PAYMENT = 'Missing Payment'
TICKET_TYPE_REMOTE = 'Ticket type is remote'
TICKET_WITHOUT_HOTEL = 'Ticket Does Not Include Hotel'
