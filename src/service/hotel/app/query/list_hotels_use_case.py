from typing import List, Self

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


class ListHotelsUseCase:
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
    async def list_hotels(self, *, user_id: int) -> List[HotelEntity]:
        await self.eligibility.execute(user_id=user_id)

        Logger.base.info('🏨 [LIST_HOTELS] Loading all hotels')
        hotels = await self.hotel_query_repo.list_hotels()
        if not hotels:
            raise NotFoundError('No hotels found')

        Logger.base.info(f'✅ [LIST_HOTELS] Found {len(hotels)} hotels')
        return hotels
