"""Department work use cases."""

from goldworks.application.use_cases.work.session_factory import WorkSessionFactory
from goldworks.application.use_cases.work.work_session import WorkSession

__all__ = ["WorkSession", "WorkSessionFactory"]
