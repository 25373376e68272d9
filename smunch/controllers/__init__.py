# smunch/controllers/__init__.py

from .payment import router as payment_router

__all__ = ["payment_router"]
