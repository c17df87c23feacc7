"""API routers."""

from haulbook.infrastructure.adapters.inbound.api.routes import fusions, health, partners

__all__ = ["fusions", "health", "partners"]
