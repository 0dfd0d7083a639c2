"""
Product Service - read access to the catalog
"""
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.core.exceptions import ProductNotFoundError
from app.core.metrics import MetricsRegistry
from app.core.monitoring import monitor_database
from app.core.tracking import track_product_view
from app.models.product import Product


class ProductService:
    """Catalog queries, each run through the database monitor"""

    def __init__(self, db: Session, metrics: MetricsRegistry):
        self.db = db
        self.metrics = metrics

    def list_products(self) -> List[Product]:
        """
        List the whole catalog ordered by product id

        Returns:
            List of products
        """
        def _query():
            return list(self.db.execute(select(Product).order_by(Product.id)).scalars().all())

        return monitor_database(self.metrics, "find_products", _query)

    def get_product(self, product_id: str) -> Product:
        """
        Get a product by ID and count the view

        Raises:
            ProductNotFoundError: no product with that id
        """
        product = monitor_database(self.metrics, "find_product", self.db.get, Product, product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        track_product_view(self.metrics, product.id)
        return product
