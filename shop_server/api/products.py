# shop_server/api/products.py

from fastapi import APIRouter, Depends, status
from shop_server.api.deps import get_product_service, products_guard
from shop_server.api.schemas import ProductCreate, ProductCreated, ProductOut
from shop_server.core.products import ProductService


# Open by default, see products_guard.
router = APIRouter(
    prefix="/api/products",
    tags=["products"],
    dependencies=[Depends(products_guard)],
)


@router.get("", response_model=list[ProductOut])
def list_products(products: ProductService = Depends(get_product_service)):
    return [p.to_dict() for p in products.list()]


@router.post("", response_model=ProductCreated, status_code=status.HTTP_201_CREATED)
def create_product(req: ProductCreate, products: ProductService = Depends(get_product_service)):
    product = products.create(
        name=req.name,
        price=req.price,
        description=req.description,
        image_url=req.image_url,
        stock=req.stock,
    )
    return {"message": "Product added successfully", "product": product.to_dict()}
