from datetime import datetime
from typing import List

from pydantic import BaseModel


class HotelResponse(BaseModel):
    id: int
    name: str
    image: str
    created_at: datetime
    updated_at: datetime

    class Config:
        json_schema_extra = {
            'example': {
                'id': 1,
                'name': 'Driven Resort',
                'image': 'https://example.com/hotel.png',
                'created_at': '2024-01-01T12:00:00Z',
                'updated_at': '2024-01-01T12:00:00Z',
            }
        }


class RoomResponse(BaseModel):
    id: int
    name: str
    capacity: int
    hotel_id: int
    created_at: datetime
    updated_at: datetime


class HotelWithRoomsResponse(HotelResponse):
    rooms: List[RoomResponse]

    class Config:
        json_schema_extra = {
            'example': {
                'id': 1,
                'name': 'Driven Resort',
                'image': 'https://example.com/hotel.png',
                'created_at': '2024-01-01T12:00:00Z',
                'updated_at': '2024-01-01T12:00:00Z',
                'rooms': [
                    {
                        'id': 1,
                        'name': '101',
                        'capacity': 3,
                        'hotel_id': 1,
                        'created_at': '2024-01-01T12:00:00Z',
                        'updated_at': '2024-01-01T12:00:00Z',
                    }
                ],
            }
        }
