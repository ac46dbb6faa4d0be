from datetime import datetime

from pydantic import Field

from autohaven.entrypoints.http.dtos.base import CamelModel
from autohaven.entrypoints.http.dtos.car import CarResponseDTO


class FavoriteResponseDTO(CamelModel):
    id: int
    user_id: int
    car_id: int
    created_at: datetime


class FavoriteWithCarDTO(CamelModel):
    favorite: FavoriteResponseDTO
    car: CarResponseDTO


class AddFavoriteDTO(CamelModel):
    car_id: int = Field(gt=0, examples=[1])
