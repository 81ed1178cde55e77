from routes.health import router as health_router
from routes.waitlist import router as waitlist_router

__all__ = ["health_router", "waitlist_router"]
