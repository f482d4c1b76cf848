from ratguide.models.base import Base, FoodType
from ratguide.models.category import Category
from ratguide.models.item import Item

__all__ = ["Base", "FoodType", "Category", "Item"]
