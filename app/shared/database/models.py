from sqlalchemy import Column, Integer, String, Numeric
from app.config.database import Base

# ===== PRODUCTS =====
# Writes go through stored procedures; the mapping is used for direct lookups only.

class Product(Base):
    """CatalogEntry row - column names as in the products table"""
    __tablename__ = "products"

    id = Column("ProductID", Integer, primary_key=True, index=True)
    name = Column("ProductName", String(255), nullable=False)
    price = Column("Price", Numeric(12, 2), nullable=False)
    mrp = Column("MRP", Numeric(12, 2), nullable=False)
    image_name = Column("ImageName", String(255))
    login_id = Column("fLoginID", Integer, nullable=False, index=True)
    barcode = Column("Barcode", String(100), unique=True)
    tax = Column("Tax", Numeric(5, 2))
    points = Column("Points", Numeric(5, 2))
