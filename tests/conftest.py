"""Pytest configuration and fixtures for goldworks.

HTTP tests build a fresh app per test with goldworks.main.create_app (no
database, no Redis). Unit tests use the in-memory collaborators below.
"""

import os
from datetime import UTC, datetime, timedelta
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("DATABASE_BACKEND", "none")
os.environ.setdefault("REDIS_ENABLED", "false")

from goldworks.application.services.activity_log import ActivityLogService  # noqa: E402
from goldworks.application.services.department_pipeline import DepartmentPipeline  # noqa: E402
from goldworks.core.config import get_settings  # noqa: E402
from goldworks.domain.entities.activity import ActivityLogEntry  # noqa: E402
from goldworks.domain.entities.order import OrderEntity, WorkSubmissionEntity  # noqa: E402
from goldworks.domain.enums import DepartmentKey, FieldType  # noqa: E402
from goldworks.domain.exceptions import PersistenceFailureException  # noqa: E402
from goldworks.domain.value_objects.core import (  # noqa: E402
    AttachmentRef,
    FormField,
    PhotoRequirement,
    RequirementSchema,
)


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2026, 3, 2, 9, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


class FakeWorkPersistence:
    """IWorkPersistence recording every write; set fail=True to raise."""

    def __init__(self) -> None:
        self.saves: list[dict[str, Any]] = []
        self.completions: list[dict[str, Any]] = []
        self.fail = False

    def _record(self, bucket: list, operation: str, order_id, department, form_data, files, photos):
        if self.fail:
            raise PersistenceFailureException(
                operation, order_id, DepartmentKey(department).value, reason="offline"
            )
        bucket.append(
            {
                "order_id": order_id,
                "department": department,
                "form_data": dict(form_data),
                "files": list(files),
                "photos": list(photos),
            }
        )

    async def save(self, order_id, department, form_data, files, photos) -> None:
        self._record(self.saves, "save", order_id, department, form_data, files, photos)

    async def complete(self, order_id, department, form_data, files, photos) -> None:
        self._record(
            self.completions, "complete", order_id, department, form_data, files, photos
        )

    async def load(self, order_id, department) -> WorkSubmissionEntity | None:
        return None


class InMemoryActivityRepository:
    def __init__(self) -> None:
        self.entries: list[ActivityLogEntry] = []

    async def append(self, entry: ActivityLogEntry) -> ActivityLogEntry:
        self.entries.append(entry)
        return entry

    async def list_for_order(self, order_id: str) -> list[ActivityLogEntry]:
        return [e for e in self.entries if e.order_id == order_id]

    def actions(self) -> list[str]:
        return [e.action.value for e in self.entries]


class InMemoryOrderRepository:
    def __init__(self) -> None:
        self.orders: dict[str, OrderEntity] = {}
        self.save_count = 0

    async def get(self, order_id: str) -> OrderEntity | None:
        return self.orders.get(order_id)

    async def add(self, order: OrderEntity) -> OrderEntity:
        self.orders[order.id] = order
        return order

    async def save(self, order: OrderEntity) -> None:
        self.save_count += 1
        self.orders[order.id] = order


class RecordingNotifier:
    def __init__(self) -> None:
        self.events: list[tuple[str, str]] = []

    async def notify(self, event, order_id, department, message) -> None:
        self.events.append((event, message))

    def names(self) -> list[str]:
        return [name for name, _ in self.events]


class FakeCache:
    """ICacheService backed by a dict."""

    def __init__(self, available: bool = True) -> None:
        self.store: dict[str, Any] = {}
        self.available = available

    def is_available(self) -> bool:
        return self.available

    async def get(self, key: str) -> Any | None:
        return self.store.get(key)

    async def set(self, key: str, value: Any, ttl: int | None = None) -> bool:
        self.store[key] = value
        return True

    async def delete(self, key: str) -> bool:
        return self.store.pop(key, None) is not None


def make_photo(category: str, ref_id: str | None = None) -> AttachmentRef:
    ref_id = ref_id or f"{category}-{make_photo.counter}"
    make_photo.counter += 1
    return AttachmentRef(id=ref_id, category=category, url=f"https://cdn.test/{ref_id}.jpg")


make_photo.counter = 0


def casting_schema() -> RequirementSchema:
    """Small CASTING schema: two required fields and one required photo category."""
    return RequirementSchema(
        department=DepartmentKey.CASTING,
        title="Casting Workshop",
        form_fields=(
            FormField(
                "metalType",
                "Metal Type",
                FieldType.SELECT,
                required=True,
                options=("22K Gold", "18K Gold", "Silver 925"),
            ),
            FormField(
                "metalWeight",
                "Metal Weight Used (grams)",
                FieldType.NUMBER,
                required=True,
                min_value=0.1,
                max_value=500,
            ),
            FormField("castingNotes", "Casting Notes", FieldType.TEXTAREA, max_length=20),
        ),
        photo_requirements=(
            PhotoRequirement("castedPiece", "Casted Piece", required=True, min_count=2, max_count=4),
            PhotoRequirement("sprueAttachment", "Sprue Attachment Point", max_count=2),
        ),
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def persistence() -> FakeWorkPersistence:
    return FakeWorkPersistence()


@pytest.fixture
def activity_repo() -> InMemoryActivityRepository:
    return InMemoryActivityRepository()


@pytest.fixture
def activity_log(activity_repo: InMemoryActivityRepository, clock: FakeClock) -> ActivityLogService:
    return ActivityLogService(activity_repo, clock=clock)


@pytest.fixture
def order_repo() -> InMemoryOrderRepository:
    return InMemoryOrderRepository()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def pipeline(activity_log: ActivityLogService, clock: FakeClock) -> DepartmentPipeline:
    return DepartmentPipeline(activity_log=activity_log, clock=clock)


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client against a freshly built FastAPI app (ASGI)."""
    get_settings.cache_clear()
    from goldworks.main import create_app

    app = create_app()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def fake_cache() -> FakeCache:
    return FakeCache()


@pytest.fixture
def casting() -> RequirementSchema:
    return casting_schema()


@pytest.fixture
def photo():
    """Factory: photo(category, ref_id=None) -> AttachmentRef."""
    return make_photo
