"""
Product API endpoints - catalog listing, product detail and image URLs
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.config.settings import Settings
from app.core.dependencies import get_app_settings, get_image_resolver, get_product_service
from app.schemas.base import Envelope
from app.schemas.product import ProductImages, ProductRead
from app.services.image_service import ImageUrlResolver
from app.services.product_service import ProductService

router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("", response_model=Envelope[list[ProductRead]])
def list_products(service: ProductService = Depends(get_product_service)):
    """
    List the catalog ordered by product id
    """
    products = service.list_products()
    return Envelope(status="ok", data=[ProductRead.model_validate(p) for p in products])


@router.get("/{product_id}", response_model=Envelope[ProductRead])
def get_product(product_id: str, service: ProductService = Depends(get_product_service)):
    """
    Get a product by id; counts as a product view
    """
    product = service.get_product(product_id)
    return Envelope(status="ok", data=ProductRead.model_validate(product))


@router.get("/{product_id}/images", response_model=Envelope[ProductImages])
def get_product_images(
    product_id: str,
    count: Optional[int] = Query(None, ge=1, le=20),
    resolver: ImageUrlResolver = Depends(get_image_resolver),
    settings: Settings = Depends(get_app_settings),
):
    """
    Image URLs for a product, plus the placeholder to swap in on load failure

    - **count**: number of images (default from S3_MAX_PRODUCT_IMAGES)
    """
    max_images = count or settings.s3.max_product_images
    images = ProductImages(
        product_id=product_id,
        images=resolver.product_images(product_id, max_images),
        fallback_src=settings.s3.placeholder_image_url,
    )
    return Envelope(status="ok", data=images)
