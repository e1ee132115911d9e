# shop_server/core/products.py

import logging
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from shop_server.core.errors import ServerError
from shop_server.models.product import Product


logger = logging.getLogger(__name__)


class ProductService:

    def __init__(self, db: Session):
        self.db = db

    def list(self) -> list[Product]:
        """Every product, unfiltered and unpaginated."""
        try:
            return self.db.query(Product).order_by(Product.id).all()
        except SQLAlchemyError as e:
            logger.exception("Listing products failed")
            raise ServerError("Server error fetching products") from e

    def create(self, name: str, price: float, description: str, image_url: str, stock: int) -> Product:
        product = Product(
            name=name,
            price=price,
            description=description,
            image_url=image_url,
            stock=stock,
        )
        try:
            self.db.add(product)
            self.db.commit()
            self.db.refresh(product)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Adding product failed")
            raise ServerError("Server error adding product") from e

        logger.info("Product %s added (%s)", product.id, product.name)
        return product
