from rafflecode.web.routers.codes import router as codes_router

__all__ = [
    "codes_router",
]
