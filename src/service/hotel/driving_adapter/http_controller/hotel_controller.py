from typing import List

from fastapi import APIRouter, Depends, status

from src.platform.exception.exceptions import ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.hotel.app.query.get_hotel_with_rooms_use_case import GetHotelWithRoomsUseCase
from src.service.hotel.app.query.list_hotels_use_case import ListHotelsUseCase
from src.service.hotel.domain.entity.hotel_entity import HotelEntity
from src.service.hotel.driving_adapter.http_controller.auth.token_auth import get_current_user_id
from src.service.hotel.driving_adapter.schema.hotel_schema import (
    HotelResponse,
    HotelWithRoomsResponse,
    RoomResponse,
)


router = APIRouter()


def _to_hotel_response(hotel: HotelEntity) -> HotelResponse:
    return HotelResponse(
        id=hotel.id,
        name=hotel.name,
        image=hotel.image,
        created_at=hotel.created_at,
        updated_at=hotel.updated_at,
    )


@router.get('', status_code=status.HTTP_200_OK)
@Logger.io
async def list_hotels(
    user_id: int = Depends(get_current_user_id),
    use_case: ListHotelsUseCase = Depends(ListHotelsUseCase.depends),
) -> List[HotelResponse]:
    hotels = await use_case.list_hotels(user_id=user_id)
    return [_to_hotel_response(hotel) for hotel in hotels]


@router.get('/{hotel_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def get_hotel_with_rooms(
    hotel_id: int,
    user_id: int = Depends(get_current_user_id),
    use_case: GetHotelWithRoomsUseCase = Depends(GetHotelWithRoomsUseCase.depends),
) -> HotelWithRoomsResponse:
    """Get a hotel and its rooms. Non-numeric ids are rejected by path validation (400)."""
    if not hotel_id:
        raise ValidationError('HotelId Must Be Sent As Parameter')

    hotel = await use_case.get_by_id(user_id=user_id, hotel_id=hotel_id)

    return HotelWithRoomsResponse(
        **_to_hotel_response(hotel).model_dump(),
        rooms=[
            RoomResponse(
                id=room.id,
                name=room.name,
                capacity=room.capacity,
                hotel_id=room.hotel_id,
                created_at=room.created_at,
                updated_at=room.updated_at,
            )
            for room in hotel.rooms
        ],
    )
