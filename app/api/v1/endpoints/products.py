from typing import List
from uuid import UUID
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from app.api import deps
from app.crud import product
from app.schemas.product import (
    ProductCreate, ProductMessage, ProductResponse, ProductSummary, ProductUpdate
)

router = APIRouter()


@router.post("/", response_model=ProductMessage, status_code=201)
def create_product(
    *,
    db: Session = Depends(deps.get_db),
    product_in: ProductCreate,
):
    """
    Crear un nuevo producto en el catálogo.

    Args:
        - `product_in`: Datos del producto, con al menos 3 características y 1 imagen

    Returns:
        `ProductMessage`: Producto creado con todos sus datos

    Example:
        ```json
        {
          "user_id": "7f9c2c1e-3a5b-4a39-9c1e-1b2f3a4d5e6f",
          "name": "Laptop Gaming",
          "price": 2500000,
          "available_quantity": 10,
          "description": "Laptop potente para gaming",
          "category": "Electronics",
          "features": [{"name": "RAM", "description": "32 GB"}, ...],
          "images": [{"url": "https://example.com/laptop.png", "description": "Frente"}]
        }
        ```
    """
    created_product = product.create(db, obj_in=product_in)
    return {"message": "Product created successfully.", "product": created_product}


@router.get("/", response_model=List[ProductSummary])
def list_products(
    db: Session = Depends(deps.get_db),
    skip: int = Query(0, ge=0, description="Número de productos a saltar para paginación"),
    limit: int = Query(100, ge=1, le=1000, description="Límite de productos por página"),
):
    """
    Listar productos (ID, nombre, características e imágenes).
    """
    return product.get_multi(db, skip=skip, limit=limit)


@router.get("/{product_id}", response_model=ProductResponse)
def get_product(
    product_id: UUID,
    db: Session = Depends(deps.get_db),
):
    db_product = product.get(db, id=product_id)
    if not db_product:
        raise HTTPException(status_code=404, detail="Product not found.")
    return db_product


@router.put("/{product_id}", response_model=ProductMessage)
def update_product(
    *,
    db: Session = Depends(deps.get_db),
    product_id: UUID,
    product_in: ProductUpdate
):
    """
    Actualizar un producto existente.

    Solo se modifican los campos presentes. Si llegan `features` o `images`
    reemplazan la colección completa.

    Raises:
        `HTTPException`: 404 si el producto no existe
    """
    db_product = product.get(db, id=product_id)
    if not db_product:
        raise HTTPException(status_code=404, detail="Product not found.")

    updated_product = product.update(db, db_obj=db_product, obj_in=product_in)
    return {"message": "Product updated successfully.", "product": updated_product}


@router.delete("/{product_id}")
def delete_product(
    *,
    db: Session = Depends(deps.get_db),
    product_id: UUID
):
    """
    Eliminar (lógicamente) un producto del catálogo.

    Las órdenes existentes conservan sus ítems y precios de venta.
    """
    db_product = product.delete(db, id=product_id)
    if not db_product:
        raise HTTPException(status_code=404, detail="Product not found.")
    return {"message": "Product removed successfully."}
