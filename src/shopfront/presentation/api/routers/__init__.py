from shopfront.presentation.api.routers.admin import router as admin_router
from shopfront.presentation.api.routers.auth import router as auth_router
from shopfront.presentation.api.routers.cart import router as cart_router
from shopfront.presentation.api.routers.orders import router as orders_router
from shopfront.presentation.api.routers.products import router as products_router
from shopfront.presentation.api.routers.profile import router as profile_router
from shopfront.presentation.api.routers.wishlist import router as wishlist_router

__all__ = [
    "admin_router",
    "auth_router",
    "cart_router",
    "orders_router",
    "products_router",
    "profile_router",
    "wishlist_router",
]
