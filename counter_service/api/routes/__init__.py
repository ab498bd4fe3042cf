from counter_service.api.routes.counter import router as counter_router

__all__ = ["counter_router"]
