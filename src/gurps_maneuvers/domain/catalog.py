"""The closed catalog of combat maneuvers."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from .enums import DefensePolicy, MovePolicy
from .maneuver import ManeuverDefinition

DEFAULT_ICON_BASE_PATH = "systems/gurps/icons/maneuvers/"

# Icon file names are relative to the icon base path.
CATALOG_ENTRIES: tuple[dict[str, object], ...] = (
    {
        "name": "do_nothing",
        "label": "GURPS.maneuverDoNothing",
        "icon": "man-nothing.png",
        "move": MovePolicy.NONE,
    },
    {
        "name": "move",
        "label": "GURPS.maneuverMove",
        "icon": "man-move.png",
        "move": MovePolicy.FULL,
    },
    {
        "name": "aim",
        "label": "GURPS.maneuverAim",
        "icon": "man-aim.png",
        "fullturn": True,
    },
    {
        "name": "change_posture",
        "label": "GURPS.maneuverChangePosture",
        "icon": "man-change-posture.png",
        "move": MovePolicy.NONE,
    },
    {
        "name": "evaluate",
        "label": "GURPS.maneuverEvaluate",
        "icon": "man-evaluate.png",
    },
    {
        "name": "attack",
        "label": "GURPS.maneuverAttack",
        "icon": "man-attack.png",
    },
    {
        "name": "feint",
        "label": "GURPS.maneuverFeint",
        "icon": "man-feint.png",
        "alt": "man-attack.png",
    },
    {
        "name": "allout_attack",
        "label": "GURPS.maneuverAllOutAttack",
        "icon": "man-allout-attack.png",
        "move": MovePolicy.HALF,
        "defense": DefensePolicy.NONE,
    },
    {
        "name": "aoa_determined",
        "label": "GURPS.maneuverAllOutAttackDetermined",
        "icon": "man-aoa-determined.png",
        "move": MovePolicy.HALF,
        "defense": DefensePolicy.NONE,
        "alt": "man-allout-attack.png",
    },
    {
        "name": "aoa_double",
        "label": "GURPS.maneuverAllOutAttackDouble",
        "icon": "man-aoa-double.png",
        "move": MovePolicy.HALF,
        "defense": DefensePolicy.NONE,
        "alt": "man-allout-attack.png",
    },
    {
        "name": "aoa_feint",
        "label": "GURPS.maneuverAllOutAttackFeint",
        "icon": "man-aoa-feint.png",
        "move": MovePolicy.HALF,
        "defense": DefensePolicy.NONE,
        "alt": "man-allout-attack.png",
    },
    {
        "name": "aoa_strong",
        "label": "GURPS.maneuverAllOutAttackStrong",
        "icon": "man-aoa-strong.png",
        "move": MovePolicy.HALF,
        "defense": DefensePolicy.NONE,
        "alt": "man-allout-attack.png",
    },
    {
        "name": "aoa_suppress",
        "label": "GURPS.maneuverAllOutAttackSuppressFire",
        "icon": "man-aoa-suppress.png",
        "move": MovePolicy.HALF,
        "defense": DefensePolicy.NONE,
        "alt": "man-allout-attack.png",
    },
    {
        "name": "move_and_attack",
        "label": "GURPS.maneuverMoveAttack",
        "icon": "man-move-attack.png",
        "move": MovePolicy.FULL,
        "defense": DefensePolicy.DODGE_OR_BLOCK_ONLY,
    },
    {
        "name": "allout_defense",
        "label": "GURPS.maneuverAllOutDefense",
        "icon": "man-defense.png",
        "move": MovePolicy.HALF,
    },
    {
        "name": "aod_dodge",
        "label": "GURPS.maneuverAllOutDefenseDodge",
        "icon": "man-def-dodge.png",
        "move": MovePolicy.HALF,
        "alt": "man-defense.png",
    },
    {
        "name": "aod_parry",
        "label": "GURPS.maneuverAllOutDefenseParry",
        "icon": "man-def-parry.png",
        "alt": "man-defense.png",
    },
    {
        "name": "aod_block",
        "label": "GURPS.maneuverAllOutDefenseBlock",
        "icon": "man-def-block.png",
        "alt": "man-defense.png",
    },
    {
        "name": "aod_double",
        "label": "GURPS.maneuverAllOutDefenseDouble",
        "icon": "man-def-double.png",
        "alt": "man-defense.png",
    },
    {
        "name": "ready",
        "label": "GURPS.maneuverReady",
        "icon": "man-ready.png",
    },
    {
        "name": "concentrate",
        "label": "GURPS.maneuverConcentrate",
        "icon": "man-concentrate.png",
        "fullturn": True,
    },
    {
        "name": "wait",
        "label": "GURPS.maneuverWait",
        "icon": "man-wait.png",
        "move": MovePolicy.NONE,
    },
)


def build_catalog(base_path: str = DEFAULT_ICON_BASE_PATH) -> Mapping[str, ManeuverDefinition]:
    """Construct the read-only name -> definition mapping in catalog order."""

    catalog: dict[str, ManeuverDefinition] = {}
    for entry in CATALOG_ENTRIES:
        definition = ManeuverDefinition.create(base_path=base_path, **entry)  # type: ignore[arg-type]
        if definition.name in catalog:
            raise ValueError(f"duplicate maneuver name '{definition.name}'")
        catalog[definition.name] = definition
    return MappingProxyType(catalog)
