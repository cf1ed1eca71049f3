from sqlalchemy import func, select

from app.models.product import Product


def count_rows(db, model):
    return db.scalar(select(func.count()).select_from(model))


def stock_of(db, product_id):
    db.expire_all()
    return db.scalar(select(Product.available_quantity).where(Product.id == product_id))
