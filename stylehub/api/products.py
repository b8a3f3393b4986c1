"""
Products API Endpoints
Catalog browsing for the storefront and product administration
"""
import logging
from decimal import Decimal
from fastapi import APIRouter, Depends, HTTPException, Query, status
from typing import Optional

from stylehub.core.auth import AdminUser, require_admin
from stylehub.core.exceptions import StorefrontError
from stylehub.domain.product import ProductCreate, ProductUpdate, ProductFilters
from stylehub.services.catalog_service import CatalogService

logger = logging.getLogger(__name__)

router = APIRouter()


def get_catalog_service() -> CatalogService:
    return CatalogService()


@router.get("/")
async def get_products(
    category: Optional[str] = Query(None, description="Men, Women, Kids, Accessories or 'all'"),
    search: Optional[str] = Query(None, description="Search in name or description"),
    min_price: Optional[Decimal] = Query(None, ge=0),
    max_price: Optional[Decimal] = Query(None, ge=0),
    colors: Optional[str] = Query(None, description="Comma-separated colors, any may match"),
    sizes: Optional[str] = Query(None, description="Comma-separated sizes, any may match"),
    featured: Optional[bool] = Query(None, description="Only featured / non-featured"),
    limit: int = Query(100, ge=1, le=1000),
    offset: int = Query(0, ge=0),
    service: CatalogService = Depends(get_catalog_service)
):
    """
    Get products with optional filters, newest first
    """
    filters = ProductFilters(
        category=category,
        search=search,
        min_price=min_price,
        max_price=max_price,
        colors=colors,
        sizes=sizes,
        featured=featured,
    )

    try:
        products, total = service.list_products(filters, limit=limit, offset=offset)

        return {
            "status": "success",
            "total": total,
            "limit": limit,
            "offset": offset,
            "count": len(products),
            "data": [product.to_dict() for product in products]
        }

    except Exception as e:
        logger.error(f"Error fetching products: {e}")
        raise HTTPException(status_code=500, detail=f"Error fetching products: {str(e)}")


@router.get("/filters")
async def get_filter_options(service: CatalogService = Depends(get_catalog_service)):
    """
    Categories, colors, sizes and price range present in the catalog
    """
    try:
        return {
            "status": "success",
            "data": service.filter_facets().model_dump()
        }

    except Exception as e:
        logger.error(f"Error fetching filter options: {e}")
        raise HTTPException(status_code=500, detail=f"Error fetching filter options: {str(e)}")


@router.get("/{product_id}")
async def get_product(product_id: int, service: CatalogService = Depends(get_catalog_service)):
    try:
        product = service.get_product(product_id)
        return {"status": "success", "data": product.to_dict()}

    except (HTTPException, StorefrontError):
        raise
    except Exception as e:
        logger.error(f"Error fetching product {product_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Error fetching product: {str(e)}")


@router.get("/{product_id}/related")
async def get_related_products(
    product_id: int,
    limit: int = Query(4, ge=1, le=20),
    service: CatalogService = Depends(get_catalog_service)
):
    """
    Other products from the same category (product page "You may also like")
    """
    try:
        products = service.related_products(product_id, limit=limit)
        return {
            "status": "success",
            "count": len(products),
            "data": [product.to_dict() for product in products]
        }

    except (HTTPException, StorefrontError):
        raise
    except Exception as e:
        logger.error(f"Error fetching related products for {product_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Error fetching related products: {str(e)}")


@router.post("/", status_code=status.HTTP_201_CREATED)
async def create_product(
    payload: ProductCreate,
    admin: AdminUser = Depends(require_admin),
    service: CatalogService = Depends(get_catalog_service)
):
    try:
        product = service.create_product(payload)
        return {"status": "success", "data": product.to_dict()}

    except (HTTPException, StorefrontError):
        raise
    except Exception as e:
        logger.error(f"Error creating product: {e}")
        raise HTTPException(status_code=500, detail=f"Error creating product: {str(e)}")


async def _update_product(product_id: int, payload: ProductUpdate, service: CatalogService):
    try:
        product = service.update_product(product_id, payload)
        return {"status": "success", "data": product.to_dict()}

    except (HTTPException, StorefrontError):
        raise
    except Exception as e:
        logger.error(f"Error updating product {product_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Error updating product: {str(e)}")


@router.put("/{product_id}")
async def update_product(
    product_id: int,
    payload: ProductUpdate,
    admin: AdminUser = Depends(require_admin),
    service: CatalogService = Depends(get_catalog_service)
):
    """
    Update a product; only supplied fields change
    """
    return await _update_product(product_id, payload, service)


@router.patch("/{product_id}")
async def patch_product(
    product_id: int,
    payload: ProductUpdate,
    admin: AdminUser = Depends(require_admin),
    service: CatalogService = Depends(get_catalog_service)
):
    return await _update_product(product_id, payload, service)


@router.delete("/{product_id}")
async def delete_product(
    product_id: int,
    admin: AdminUser = Depends(require_admin),
    service: CatalogService = Depends(get_catalog_service)
):
    try:
        service.delete_product(product_id)
        return {"status": "success", "message": "Product deleted successfully"}

    except (HTTPException, StorefrontError):
        raise
    except Exception as e:
        logger.error(f"Error deleting product {product_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Error deleting product: {str(e)}")
