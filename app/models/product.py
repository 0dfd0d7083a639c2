from sqlalchemy import Column, Integer, String, Text

from app.core.db import Base


class Product(Base):
    __tablename__ = "products"

    id = Column(String(1), primary_key=True)
    name = Column(String(255), nullable=False)
    price = Column(Integer, nullable=False)  # smallest currency unit
    description = Column(Text, nullable=False, default="")
    quantity = Column(Integer, nullable=False, default=0)

    def __repr__(self) -> str:  # pragma: no cover
        return f"<Product id={self.id} name={self.name}>"
