from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.hotel.app.interface.i_hotel_query_repo import IHotelQueryRepo
from src.service.hotel.app.query.check_hotel_eligibility_use_case import (
    CheckHotelEligibilityUseCase,
)
from src.service.hotel.domain.entity.hotel_entity import HotelEntity


class GetHotelWithRoomsUseCase:
    def __init__(
        self,
        eligibility: CheckHotelEligibilityUseCase,
        hotel_query_repo: IHotelQueryRepo,
    ) -> None:
        self.eligibility = eligibility
        self.hotel_query_repo = hotel_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        eligibility: CheckHotelEligibilityUseCase = Depends(CheckHotelEligibilityUseCase.depends),
        hotel_query_repo: IHotelQueryRepo = Depends(Provide[Container.hotel_query_repo]),
    ) -> Self:
        return cls(eligibility=eligibility, hotel_query_repo=hotel_query_repo)

    @Logger.io
    async def get_by_id(self, *, user_id: int, hotel_id: int) -> HotelEntity:
        """Get hotel with its rooms once the user's ticket is cleared for hotel access."""
        await self.eligibility.execute(user_id=user_id)

        Logger.base.info(f'🏨 [GET_HOTEL] Loading hotel {hotel_id} with rooms')
        hotel = await self.hotel_query_repo.get_hotel_with_rooms(hotel_id=hotel_id)
        if hotel is None:
            Logger.base.warning(f'⚠️ [GET_HOTEL] Hotel {hotel_id} not found')
            raise NotFoundError(f'Hotel not found: {hotel_id}')

        Logger.base.info(f'✅ [GET_HOTEL] Found hotel {hotel_id} with {len(hotel.rooms)} rooms')
        return hotel
