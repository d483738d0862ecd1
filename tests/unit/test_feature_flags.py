"""Tests for DepartmentFeatureFlags."""

import pytest

from goldworks.application.services.feature_flags import DEFAULT_FLAGS, DepartmentFeatureFlags
from goldworks.domain.enums import DepartmentKey
from goldworks.domain.exceptions import ValidationException


def test_defaults_enable_everything_but_print() -> None:
    flags = DepartmentFeatureFlags()
    snapshot = flags.snapshot()
    assert list(snapshot) == DepartmentKey.values()
    assert snapshot["PRINT"] is False
    assert all(v for k, v in snapshot.items() if k != "PRINT")
    assert DEFAULT_FLAGS[DepartmentKey.CAD] is True


def test_unknown_department_is_reported_enabled() -> None:
    assert DepartmentFeatureFlags().is_department_enabled("LASER") is True


def test_settings_defaults_accept_legacy_ids_and_skip_unknown() -> None:
    flags = DepartmentFeatureFlags(defaults={"3D_PRINTING": True, "MEENA": False, "LASER": False})
    assert flags.is_department_enabled(DepartmentKey.PRINT)
    assert not flags.is_department_enabled(DepartmentKey.MEENA)


async def test_set_flag_rejects_unknown_department() -> None:
    with pytest.raises(ValidationException):
        await DepartmentFeatureFlags().set_flag("LASER", False)


async def test_set_flag_persists_to_cache(fake_cache) -> None:
    flags = DepartmentFeatureFlags(cache=fake_cache, storage_key="flags")
    await flags.set_flag("MEENA", False)
    assert fake_cache.store["flags"]["MEENA"] is False

    reloaded = DepartmentFeatureFlags(cache=fake_cache, storage_key="flags")
    assert reloaded.is_department_enabled("MEENA")
    await reloaded.load_flags()
    assert not reloaded.is_department_enabled("MEENA")


async def test_load_flags_without_cache_returns_defaults() -> None:
    flags = DepartmentFeatureFlags()
    await flags.set_flag(DepartmentKey.SETTING, False)
    snapshot = await flags.load_flags()
    assert snapshot["SETTING"] is True


async def test_unavailable_cache_keeps_flags_in_memory(fake_cache) -> None:
    fake_cache.available = False
    flags = DepartmentFeatureFlags(cache=fake_cache, storage_key="flags")
    await flags.set_flag("FILLING", False)
    assert fake_cache.store == {}
    assert not flags.is_department_enabled("FILLING")


async def test_reset_flags_drops_stored_overrides(fake_cache) -> None:
    flags = DepartmentFeatureFlags(cache=fake_cache, storage_key="flags")
    await flags.set_flag("PRINT", True)
    snapshot = await flags.reset_flags()
    assert snapshot["PRINT"] is False
    assert "flags" not in fake_cache.store


async def test_cache_dropping_out_falls_back_to_memory(fake_cache) -> None:
    flags = DepartmentFeatureFlags(cache=fake_cache, storage_key="flags")
    await flags.set_flag("MEENA", False)
    fake_cache.available = False
    assert (await flags.load_flags())["MEENA"] is True
    await flags.reset_flags()
    assert fake_cache.store["flags"]["MEENA"] is False
