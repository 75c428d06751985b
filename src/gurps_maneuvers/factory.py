"""Service factory for the maneuver layer.

Use these functions in production code to wire the registry, the lifecycle
binder and the hook bus together from :class:`Settings`.  For testing,
construct :class:`CombatLifecycleBinder` directly with a fake authority.

Example:
    settings = get_settings()
    registry = create_registry(settings)
    hooks = create_hook_bus(settings, registry)
    hooks.emit(LifecycleEvent.PARTICIPANT_ADDED, combatant, {}, user_id)
"""

from gurps_maneuvers.config import Settings
from gurps_maneuvers.domain.hooks import HookBus
from gurps_maneuvers.domain.registry import ManeuverRegistry
from gurps_maneuvers.repository import JsonEncounterRepository
from gurps_maneuvers.services.encounter_service import EncounterService
from gurps_maneuvers.services.lifecycle_service import CombatLifecycleBinder, StaticAuthority


def create_registry(settings: Settings) -> ManeuverRegistry:
    """Build a registry using the configured icon directory.

    The process-wide registry returned by ``get_registry`` is left untouched.

    Args:
        settings: Application settings

    Returns:
        A new ManeuverRegistry
    """
    return ManeuverRegistry.initialize(settings.icon_base_path)


def create_lifecycle_binder(
    settings: Settings, registry: ManeuverRegistry
) -> CombatLifecycleBinder:
    """Create a CombatLifecycleBinder honoring the configured authority.

    Args:
        settings: Application settings
        registry: Registry the binder resolves the default maneuver against

    Returns:
        Binder that assigns ``settings.default_maneuver`` on join
    """
    return CombatLifecycleBinder(
        StaticAuthority(settings.game_master),
        registry=registry,
        default_maneuver=settings.default_maneuver,
    )


def create_hook_bus(settings: Settings, registry: ManeuverRegistry) -> HookBus:
    """Create a HookBus with the lifecycle binder already subscribed.

    Args:
        settings: Application settings
        registry: Registry shared with the lifecycle binder

    Returns:
        HookBus ready to receive lifecycle events
    """
    hooks = HookBus()
    create_lifecycle_binder(settings, registry).register(hooks)
    return hooks


def create_encounter_service(settings: Settings) -> EncounterService:
    """Create an EncounterService with all dependencies.

    Args:
        settings: Application settings

    Returns:
        EncounterService persisting to ``settings.data_dir``
    """
    registry = create_registry(settings)
    return EncounterService(
        JsonEncounterRepository(settings.data_dir),
        create_hook_bus(settings, registry),
        registry,
    )
