from datetime import datetime
from typing import Optional

from sqlalchemy import CheckConstraint, DateTime, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from ratguide.models.base import Base


class Item(Base):
    __tablename__ = "custom_food_items"
    __table_args__ = (
        CheckConstraint("type IN ('safe', 'dangerous')", name="ck_custom_food_items_type"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(200))
    type: Mapped[str] = mapped_column(String(20))
    # Points at categories.id but is not a constraint: dangling ids are kept
    # and show up as uncategorized.
    category_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True, index=True)
    description: Mapped[str] = mapped_column(Text, default="", server_default="")
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())
