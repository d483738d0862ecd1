"""Department feature flags.

Injected service that decides whether a department uses its full or reduced
requirement schema. Defaults come from settings; overrides are stored in the
cache service when it is available, otherwise only in process memory.
"""

from __future__ import annotations

from goldworks.application.interfaces.services import ICacheService
from goldworks.application.services.requirement_catalog import resolve_department_key
from goldworks.domain.enums import DepartmentKey
from goldworks.domain.exceptions import ValidationException
from goldworks.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

DEFAULT_FLAGS: dict[DepartmentKey, bool] = {
    key: key != DepartmentKey.PRINT for key in DepartmentKey
}


class DepartmentFeatureFlags:
    """Per-department enable/disable switches.

    Unknown department keys are always reported as enabled. Flags never
    change the department ordering.
    """

    def __init__(
        self,
        cache: ICacheService | None = None,
        defaults: dict[str, bool] | None = None,
        storage_key: str = "goldworks:department-flags",
    ) -> None:
        self._cache = cache
        self._storage_key = storage_key
        self._defaults = dict(DEFAULT_FLAGS)
        for raw_key, enabled in (defaults or {}).items():
            key = resolve_department_key(raw_key)
            if key is None:
                logger.warning("Ignoring flag default for unknown department %s", raw_key)
                continue
            self._defaults[key] = bool(enabled)
        self._flags = dict(self._defaults)

    def _ready_cache(self) -> ICacheService | None:
        """The cache when it is configured and reachable, else None."""
        if self._cache is not None and self._cache.is_available():
            return self._cache
        return None

    async def _persist(self) -> None:
        cache = self._ready_cache()
        if cache is not None:
            await cache.set(self._storage_key, self.snapshot(), ttl=None)

    async def load_flags(self) -> dict[str, bool]:
        """Reset to defaults, overlay stored values, and return the snapshot."""
        flags = dict(self._defaults)
        cache = self._ready_cache()
        if cache is not None:
            stored = await cache.get(self._storage_key)
            if isinstance(stored, dict):
                for raw_key, enabled in stored.items():
                    key = resolve_department_key(raw_key)
                    if key is not None:
                        flags[key] = bool(enabled)
        self._flags = flags
        logger.debug("Department flags loaded: %s", self.snapshot())
        return self.snapshot()

    async def set_flag(self, department: DepartmentKey | str, enabled: bool) -> dict[str, bool]:
        """Enable or disable one department and persist the change.

        Raises:
            ValidationException: If department is not a known key.
        """
        key = resolve_department_key(department)
        if key is None:
            raise ValidationException(
                f"Unknown department: {department}", field="department"
            )
        self._flags[key] = bool(enabled)
        await self._persist()
        logger.info("Department %s %s", key.value, "enabled" if enabled else "disabled")
        return self.snapshot()

    async def reset_flags(self) -> dict[str, bool]:
        """Restore defaults and drop stored overrides."""
        self._flags = dict(self._defaults)
        cache = self._ready_cache()
        if cache is not None:
            await cache.delete(self._storage_key)
        logger.info("Department flags reset to defaults")
        return self.snapshot()

    def is_department_enabled(self, department: DepartmentKey | str) -> bool:
        key = resolve_department_key(department)
        if key is None:
            return True
        return self._flags.get(key, True)

    def snapshot(self) -> dict[str, bool]:
        """Current flags keyed by department key value, in pipeline order."""
        return {key.value: self._flags.get(key, True) for key in DepartmentKey}
