"""Read-only query API over the maneuver catalog.

Every operation is a pure read: nothing here mutates the catalog or any
token.  Lookups by an unchecked string go through :meth:`ManeuverRegistry.get`
(raises :class:`UnknownManeuver`) or :meth:`ManeuverRegistry.find` (returns
``None``); neither silently substitutes a default maneuver.

The process-wide registry is built on first use by :func:`get_registry`, or
explicitly at startup with :func:`initialize_registry`.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from gurps_maneuvers.interfaces.markers import IStatusMarker

from .catalog import DEFAULT_ICON_BASE_PATH, build_catalog
from .errors import UnknownManeuver
from .maneuver import (
    CORE_SCOPE,
    MANEUVER_STATUS_ID,
    STATUS_ID_FLAG,
    ManeuverDefinition,
    ManeuverEffectPayload,
    project,
)


def is_marker_maneuver(marker: IStatusMarker | object) -> bool:
    """Return True if the marker's status id tag is the maneuver kind.

    Objects without a ``get_flag`` capability are never maneuvers.
    """

    get_flag = getattr(marker, "get_flag", None)
    if not callable(get_flag):
        return False
    return get_flag(CORE_SCOPE, STATUS_ID_FLAG) == MANEUVER_STATUS_ID


class ManeuverRegistry:
    """Lookups, icon classification and bulk export over a fixed catalog."""

    def __init__(self, catalog: Mapping[str, ManeuverDefinition]) -> None:
        self._catalog = catalog
        self._icons = frozenset(definition.icon_path for definition in catalog.values())

    @classmethod
    def initialize(cls, base_path: str = DEFAULT_ICON_BASE_PATH) -> ManeuverRegistry:
        """Build a registry over a freshly constructed catalog."""

        return cls(build_catalog(base_path))

    def __contains__(self, name: object) -> bool:
        return name in self._catalog

    def __len__(self) -> int:
        return len(self._catalog)

    def names(self) -> list[str]:
        """Maneuver names in catalog order."""

        return list(self._catalog)

    def definition(self, name: str) -> ManeuverDefinition:
        try:
            return self._catalog[name]
        except KeyError:
            raise UnknownManeuver(name) from None

    def get(self, name: str) -> ManeuverEffectPayload:
        """Return the effect payload for ``name`` or raise ``UnknownManeuver``."""

        return project(self.definition(name))

    def get_maneuver(self, name: str) -> ManeuverEffectPayload:
        return self.get(name)

    def find(self, name: str) -> ManeuverEffectPayload | None:
        """Return the payload for ``name``, or ``None`` when it is not cataloged."""

        definition = self._catalog.get(name)
        return project(definition) if definition is not None else None

    def get_icon(self, name: str) -> str:
        return self.definition(name).icon_path

    def is_maneuver_icon(self, path: str) -> bool:
        """True if ``path`` is the primary icon of some maneuver.

        Alternate icons are deliberately not matched.
        """

        return path in self._icons

    def get_maneuver_icons(self, paths: Iterable[str]) -> list[str]:
        """Return the maneuver icon paths from ``paths``, keeping input order."""

        return [path for path in paths if self.is_maneuver_icon(path)]

    def get_by_icon(self, path: str) -> list[ManeuverEffectPayload]:
        """All payloads whose primary icon is ``path``."""

        return [project(d) for d in self._catalog.values() if d.icon_path == path]

    def get_all(self) -> Mapping[str, ManeuverDefinition]:
        return self._catalog

    def export_all(self) -> dict[str, ManeuverEffectPayload]:
        """Snapshot of every maneuver projected to its payload."""

        return {name: project(definition) for name, definition in self._catalog.items()}

    def get_all_data(self) -> dict[str, ManeuverEffectPayload]:
        return self.export_all()

    @staticmethod
    def is_marker_maneuver(marker: IStatusMarker | object) -> bool:
        return is_marker_maneuver(marker)

    @staticmethod
    def filter_maneuver_markers(
        markers: Iterable[IStatusMarker] | None,
    ) -> list[IStatusMarker]:
        """Just the markers that are maneuvers; ``None`` yields an empty list."""

        if markers is None:
            return []
        return [marker for marker in markers if is_marker_maneuver(marker)]


_registry: ManeuverRegistry | None = None


def initialize_registry(base_path: str = DEFAULT_ICON_BASE_PATH) -> ManeuverRegistry:
    """Build the process-wide registry, replacing any existing one."""

    global _registry
    _registry = ManeuverRegistry.initialize(base_path)
    return _registry


def get_registry() -> ManeuverRegistry:
    """Return the process-wide registry, building it on first use."""

    global _registry
    if _registry is None:
        _registry = ManeuverRegistry.initialize()
    return _registry


def reset_registry() -> None:
    """Drop the process-wide registry. Useful for testing."""

    global _registry
    _registry = None
