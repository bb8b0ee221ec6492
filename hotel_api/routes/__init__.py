# Routes package init
"""
Hotel API - API Routes Package
================================

What:  HTTP route handlers, grouped into versioned routers.

Route Inventory:
    /api/v1  (api_v1_router)
        - ping.py:    GET    /ping
        - hotels.py:  POST   /hotel/create
                      GET    /hotel/all-hotels
                      GET    /hotel/deleted-hotels
                      GET    /hotel/{id}
                      PUT    /hotel/{id}
                      DELETE /hotel/{id}
                      DELETE /hotel/soft-delete/{id}
    /api/v2  (api_v2_router)
        - health.py:  GET    /health

Routes stay thin: read the request, call one service operation, format
the response.
"""

from fastapi import APIRouter

from hotel_api.routes import health, hotels, ping

api_v1_router = APIRouter(prefix="/api/v1")
api_v1_router.include_router(ping.router)
api_v1_router.include_router(hotels.router)

api_v2_router = APIRouter(prefix="/api/v2")
api_v2_router.include_router(health.router)
