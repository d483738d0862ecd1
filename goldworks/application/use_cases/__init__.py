"""Application use cases: one entry point per workflow."""

from goldworks.application.use_cases.orders import OrderService
from goldworks.application.use_cases.work import WorkSession, WorkSessionFactory

__all__ = ["OrderService", "WorkSession", "WorkSessionFactory"]
