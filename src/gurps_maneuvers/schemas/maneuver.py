from pydantic import BaseModel, Field


class EffectChangeRead(BaseModel):
    key: str = Field(..., description="Actor data path the change targets")
    value: str = Field(..., description="Value applied to the path")
    mode: int = Field(..., ge=0, le=5, description="Active-effect application mode")
    priority: int | None = Field(None, description="Application priority (override changes only)")


class ManeuverFlagsRead(BaseModel):
    name: str = Field(..., description="Catalog name of the maneuver")
    move: str = Field(..., description="Movement policy (none/step/half/full)")
    defense: str = Field(..., description="Defense policy (any/none/dodge-block)")
    fullturn: bool = Field(..., description="Whether the maneuver takes the whole turn")
    icon: str = Field(..., description="Primary icon path")
    alt: str | None = Field(None, description="Shared icon of the related maneuver, if any")


class ManeuverRead(BaseModel):
    id: str = Field(..., description="Status id of the effect (always 'maneuver')")
    label: str = Field(..., description="Localization key of the display label")
    icon: str = Field(..., description="Icon path")
    flags: dict[str, ManeuverFlagsRead] = Field(..., description="Maneuver metadata by scope")
    changes: list[EffectChangeRead] = Field(..., description="Declarative field overrides")
