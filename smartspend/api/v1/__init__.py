from .auth_controller import router as auth_router
from .transaction_controller import router as transaction_router
from .health_controller import router as health_router


__all__ = ["auth_router", "transaction_router", "health_router"]
