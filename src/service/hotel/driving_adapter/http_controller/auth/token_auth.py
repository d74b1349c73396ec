from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.platform.config.di import Container
from src.service.hotel.app.interface.i_session_query_repo import ISessionQueryRepo
from src.service.hotel.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


# auto_error=False so a missing header answers 401 through AuthenticationError, not 403
bearer_scheme = HTTPBearer(auto_error=False)


@inject
async def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
    session_query_repo: ISessionQueryRepo = Depends(Provide[Container.session_query_repo]),
) -> int:
    token = credentials.credentials if credentials else None
    return await jwt_auth.get_user_id_from_token(token, session_query_repo)
