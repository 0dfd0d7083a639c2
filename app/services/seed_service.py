"""
Catalog seed loader.

Replaces the products table with the fixed Meo Stationery catalog: every
existing row is deleted, then the 15 products below are inserted in order.
"""

import logging
from typing import Any, Dict, List, Sequence

from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.db import Database
from app.core.exceptions import SeedError
from app.models.product import Product

logger = logging.getLogger(__name__)


PRODUCTS: List[Dict[str, Any]] = [
    # Notebooks/Journals
    {"id": "A", "name": "Premium Spiral Notebook", "price": 15000,
     "description": "High-quality spiral notebook perfect for students and professionals", "quantity": 50},
    # Pens & Writing
    {"id": "B", "name": "Gel Pen Set", "price": 25000,
     "description": "Smooth writing gel pens in multiple colors", "quantity": 100},
    # Art Supplies
    {"id": "C", "name": "Colored Pencil Set", "price": 45000,
     "description": "Professional grade colored pencils for artists", "quantity": 30},
    # Office Supplies
    {"id": "D", "name": "Document Organizer", "price": 35000,
     "description": "Keep your documents organized and accessible", "quantity": 25},
    # School Supplies
    {"id": "E", "name": "Student Starter Kit", "price": 55000,
     "description": "Complete kit for students with essential supplies", "quantity": 40},
    # Planning & Organization
    {"id": "F", "name": "Weekly Planner", "price": 28000,
     "description": "Stay organized with this beautiful weekly planner", "quantity": 35},
    # Craft Supplies
    {"id": "G", "name": "Craft Paper Bundle", "price": 20000,
     "description": "Assorted craft papers for all your creative projects", "quantity": 60},
    # Highlighters
    {"id": "H", "name": "Highlighter Set", "price": 18000,
     "description": "Bright highlighters for studying and note-taking", "quantity": 80},
    # Journals
    {"id": "J", "name": "Leather Bound Journal", "price": 65000,
     "description": "Elegant leather journal for special thoughts", "quantity": 20},
    # Erasers & Correction
    {"id": "K", "name": "Eraser Collection", "price": 12000,
     "description": "Various erasers for different needs", "quantity": 90},
    # Labels & Stickers
    {"id": "L", "name": "Label Maker Kit", "price": 42000,
     "description": "Create professional labels for organization", "quantity": 15},
    # Markers
    {"id": "M", "name": "Permanent Marker Set", "price": 32000,
     "description": "Long-lasting permanent markers for various surfaces", "quantity": 45},
    # Notebooks
    {"id": "N", "name": "Hardcover Notebook", "price": 38000,
     "description": "Durable hardcover notebook for important notes", "quantity": 30},
    # Office Accessories
    {"id": "O", "name": "Desk Organizer Set", "price": 48000,
     "description": "Complete desk organization solution", "quantity": 25},
    # Paper Products
    {"id": "P", "name": "Premium Paper Stack", "price": 22000,
     "description": "High-quality paper for printing and writing", "quantity": 70},
]


def seed_products(session: Session, products: Sequence[Dict[str, Any]] = PRODUCTS) -> int:
    """
    Delete every product and insert ``products`` in order.

    The caller owns the transaction; nothing is committed here.

    Returns:
        Number of products created

    Raises:
        SeedError: a product could not be inserted
    """
    logger.info("Seeding database...")

    session.execute(delete(Product))
    logger.info("Cleared existing products")

    for data in products:
        try:
            session.add(Product(**data))
            session.flush()
        except SQLAlchemyError as e:
            raise SeedError(
                f"Failed to create product {data.get('id')}: {e}",
                details={"product_id": data.get("id")},
            ) from e
        logger.info(f"Created product: {data['name']}", extra={"product_id": data["id"]})

    logger.info("Seeding completed!")
    logger.info(f"Created {len(products)} products")
    return len(products)


def run_seed(database: Database, products: Sequence[Dict[str, Any]] = PRODUCTS) -> int:
    """
    Seed ``database`` and release its connections.

    Returns:
        Process exit code: 0 on success, 1 on any failure
    """
    try:
        database.create_all()
        with database.session() as session:
            seed_products(session, products)
        return 0
    except Exception as e:
        logger.error(f"Error seeding database: {e}", exc_info=True)
        return 1
    finally:
        database.dispose()
