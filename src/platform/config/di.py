"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.database.orm_db_setting import Database
from src.service.hotel.driven_adapter.repo.enrollment_query_repo_impl import (
    EnrollmentQueryRepoImpl,
)
from src.service.hotel.driven_adapter.repo.hotel_query_repo_impl import HotelQueryRepoImpl
from src.service.hotel.driven_adapter.repo.session_query_repo_impl import SessionQueryRepoImpl
from src.service.hotel.driven_adapter.repo.ticket_query_repo_impl import TicketQueryRepoImpl
from src.service.hotel.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


class Container(containers.DeclarativeContainer):
    # Database (event-loop-aware engine behind a session context manager)
    database = providers.Singleton(Database)

    # Repositories (stateless - open a session per call)
    enrollment_query_repo = providers.Singleton(
        EnrollmentQueryRepoImpl, session_factory=database.provided.session
    )
    ticket_query_repo = providers.Singleton(
        TicketQueryRepoImpl, session_factory=database.provided.session
    )
    hotel_query_repo = providers.Singleton(
        HotelQueryRepoImpl, session_factory=database.provided.session
    )
    session_query_repo = providers.Singleton(
        SessionQueryRepoImpl, session_factory=database.provided.session
    )

    # Auth service
    jwt_auth = providers.Singleton(JwtAuth)


container = Container()
