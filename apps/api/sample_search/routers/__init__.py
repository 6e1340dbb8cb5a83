from .organisation import router as organisation_router

ROUTERS = (organisation_router,)

__all__ = ["ROUTERS", "organisation_router"]
