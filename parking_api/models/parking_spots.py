from typing import Optional

from sqlmodel import Field, SQLModel


class ParkingSpot(SQLModel, table=True):
    __tablename__ = "parking_spots"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=50)

    def __repr__(self):
        return f"<ParkingSpot(id={self.id}, name='{self.name}')>"
