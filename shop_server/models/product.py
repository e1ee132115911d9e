# shop_server/models/product.py

from sqlalchemy import Column, Float, Integer, String, Text
from . import Base


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    price = Column(Float, nullable=False)
    description = Column(Text, nullable=False)
    image_url = Column(String, nullable=False)
    stock = Column(Integer, nullable=False, default=0)

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "name": self.name,
            "price": self.price,
            "description": self.description,
            "imageUrl": self.image_url,
            "stock": self.stock,
        }
