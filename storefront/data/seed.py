# storefront/data/seed.py
from decimal import Decimal

from storefront.data.database import SessionLocal
from storefront.data.models import CategoryModel, ProductModel
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

CATALOGUE = {
    "Fruits & Vegetables": [
        ("Bananas", Decimal("40.00"), "dozen"),
        ("Tomatoes", Decimal("30.00"), "kg"),
    ],
    "Dairy": [
        ("Toned Milk", Decimal("27.00"), "500 ml"),
        ("Paneer", Decimal("90.00"), "200 g"),
    ],
}


def seed(db=None):
    """Insert a small dev catalogue. Skips when products already exist."""
    own_session = db is None
    if own_session:
        db = SessionLocal()
    try:
        if db.query(ProductModel).first():
            return 0

        created = 0
        for category_name, products in CATALOGUE.items():
            category = CategoryModel(name=category_name)
            db.add(category)
            for name, price, unit in products:
                db.add(ProductModel(name=name, price=price, unit=unit, category=category, stock_quantity=100))
                created += 1
        db.commit()
        logger.info(f"Seeded {created} products")
        return created
    finally:
        if own_session:
            db.close()


if __name__ == "__main__":
    seed()
