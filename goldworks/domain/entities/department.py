"""Department domain entity.

The closed, ordered set of manufacturing departments an order flows through.
Defined once at import; ordering is by sequence and never changes at runtime.
"""

from dataclasses import dataclass

from goldworks.domain.enums import DepartmentKey


@dataclass(frozen=True)
class Department:
    """A manufacturing stage with a stable key, display name and sequence."""

    key: DepartmentKey
    display_name: str
    sequence: int

    def __post_init__(self) -> None:
        if self.sequence < 1:
            raise ValueError(f"Department sequence must be >= 1, got {self.sequence}")


DEPARTMENTS: tuple[Department, ...] = (
    Department(DepartmentKey.CAD, "CAD Design", 1),
    Department(DepartmentKey.PRINT, "3D Print", 2),
    Department(DepartmentKey.CASTING, "Casting", 3),
    Department(DepartmentKey.FILLING, "Filling", 4),
    Department(DepartmentKey.MEENA, "Meena Work", 5),
    Department(DepartmentKey.POLISH_1, "Polish 1", 6),
    Department(DepartmentKey.SETTING, "Stone Setting", 7),
    Department(DepartmentKey.POLISH_2, "Polish 2", 8),
    Department(DepartmentKey.ADDITIONAL, "Finishing Touch", 9),
)

_BY_KEY: dict[DepartmentKey, Department] = {d.key: d for d in DEPARTMENTS}

if set(_BY_KEY) != set(DepartmentKey):
    raise RuntimeError("DEPARTMENTS must define every DepartmentKey exactly once")


def get_department(key: DepartmentKey | str) -> Department:
    """Return the Department for key.

    Raises:
        KeyError: If key is not a department key.
    """
    parsed = DepartmentKey.parse(key)
    if parsed is None:
        raise KeyError(key)
    return _BY_KEY[parsed]


def department_sequence(key: DepartmentKey | str) -> int:
    """Return the 1-based sequence number of a department."""
    return get_department(key).sequence


def ordered_keys() -> list[DepartmentKey]:
    """Department keys in pipeline order."""
    return [d.key for d in sorted(DEPARTMENTS, key=lambda d: d.sequence)]
