# Business logic services

from .image_service import ImageUrlResolver, FallbackImage
from .product_service import ProductService
from .seed_service import PRODUCTS, seed_products, run_seed

__all__ = [
    "ImageUrlResolver",
    "FallbackImage",
    "ProductService",
    "PRODUCTS",
    "seed_products",
    "run_seed",
]
