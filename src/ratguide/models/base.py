import enum

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


class FoodType(str, enum.Enum):
    SAFE = "safe"
    DANGEROUS = "dangerous"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]
