from sqlalchemy.orm import Session
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy import Integer, Numeric, delete, func, insert, select, type_coerce, update
from typing import Optional, List
from decimal import Decimal
import logging

from inventory_api.database import Base, create_session_factory
from inventory_api.models.product import Product
from inventory_api.schemas.product import ProductPayload, ProductStats

logger = logging.getLogger(__name__)


SAMPLE_PRODUCTS = [
    ("Laptop Pro", "Electronics", 15, Decimal("1299.99"), "High-performance laptop"),
    ("Wireless Mouse", "Electronics", 45, Decimal("29.99"), "Ergonomic wireless mouse"),
    ("Office Chair", "Furniture", 8, Decimal("199.99"), "Comfortable office chair"),
    ("Coffee Beans", "Food", 120, Decimal("12.99"), "Premium coffee beans"),
    ("Notebook Set", "Office Supplies", 200, Decimal("8.99"), "Pack of 3 notebooks"),
]


class ProductService:
    """
    Service class for Product storage operations.

    Every public method maps to a single SQL statement. Database errors are
    not interpreted here: the session is rolled back and the original
    SQLAlchemyError propagates to the caller.
    """

    def __init__(self, db: Session):
        self.db = db

    def list_all(self) -> List[Product]:
        """Return all products, most recently created first."""
        stmt = select(Product).order_by(Product.created_at.desc(), Product.id.desc())
        return list(self.db.scalars(stmt).all())

    def get_by_id(self, product_id: int) -> Optional[Product]:
        """
        Get a product by ID.

        Returns:
            Product instance or None if not found
        """
        return self.db.get(Product, product_id)

    def create(self, product_data: ProductPayload) -> int:
        """
        Insert a new product.

        id, created_at and updated_at are assigned by the database.

        Returns:
            The generated product id
        """
        product = Product(**self._column_values(product_data))
        try:
            self.db.add(product)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        return product.id

    def update(self, product_id: int, product_data: ProductPayload) -> int:
        """
        Rewrite every mutable field of a product and refresh updated_at.

        Fields missing from the payload are written as NULL.

        Returns:
            Number of affected rows (0 when the product does not exist)
        """
        stmt = (
            update(Product)
            .where(Product.id == product_id)
            .values(**self._column_values(product_data), updated_at=func.now())
            .execution_options(synchronize_session=False)
        )
        return self._execute_counted(stmt)

    def delete(self, product_id: int) -> int:
        """
        Delete a product.

        Returns:
            Number of affected rows (0 when the product does not exist)
        """
        stmt = (
            delete(Product)
            .where(Product.id == product_id)
            .execution_options(synchronize_session=False)
        )
        return self._execute_counted(stmt)

    def get_stats(self) -> ProductStats:
        """Compute count, quantity total, distinct categories and stock value in one query."""
        stmt = select(
            func.count().label("total_products"),
            type_coerce(func.sum(Product.quantity), Integer).label("total_items"),
            func.count(Product.category.distinct()).label("categories"),
            type_coerce(
                func.sum(Product.quantity * Product.price), Numeric(12, 2)
            ).label("total_value"),
        ).select_from(Product)
        row = self.db.execute(stmt).one()
        return ProductStats(**row._mapping)

    def count(self) -> int:
        """Return the number of rows in the products table."""
        return self.db.scalar(select(func.count()).select_from(Product))

    def seed_if_empty(self) -> int:
        """
        Insert the sample products when the table has no rows.

        Returns:
            Number of rows inserted (0 if the table already had data)
        """
        if self.count() > 0:
            return 0

        rows = [
            {
                "name": name,
                "category": category,
                "quantity": quantity,
                "price": price,
                "description": description,
            }
            for name, category, quantity, price, description in SAMPLE_PRODUCTS
        ]
        try:
            self.db.execute(insert(Product), rows)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        logger.info("Sample products inserted.")
        return len(rows)

    def _execute_counted(self, stmt) -> int:
        try:
            result = self.db.execute(stmt)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        return result.rowcount

    @staticmethod
    def _column_values(product_data: ProductPayload) -> dict:
        return {
            "name": product_data.name,
            "category": product_data.category,
            "quantity": product_data.quantity,
            "price": product_data.price,
            "description": product_data.description,
        }


def init_db(engine: Engine) -> int:
    """
    Create the products table if needed and seed it when empty.

    Safe to call more than once: seeding is gated on the row count.

    Returns:
        Number of seeded rows
    """
    Base.metadata.create_all(bind=engine)
    session = create_session_factory(engine)()
    try:
        return ProductService(session).seed_if_empty()
    finally:
        session.close()
