"""
Hotel Query Repository Interface

Read side for hotel inventory - hotels are never mutated by this service.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.hotel.domain.entity.hotel_entity import HotelEntity


class IHotelQueryRepo(ABC):
    @abstractmethod
    async def list_hotels(self) -> List[HotelEntity]:
        """Get all hotels (without rooms)."""
        pass

    @abstractmethod
    async def get_hotel_with_rooms(self, *, hotel_id: int) -> Optional[HotelEntity]:
        """Get a single hotel with its rooms loaded."""
        pass
