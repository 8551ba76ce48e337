"""
Pydantic settings schema for projinit.

Defines the wizard defaults and animation tuning with validation.
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Defaults
# =============================================================================


class DefaultsConfig(BaseModel):
    """Values pre-selected when the wizard starts."""

    model_config = ConfigDict(extra="allow")

    language: str = "Go"
    framework: str = "Cobra"
    dir: str = "."


# =============================================================================
# Animation
# =============================================================================


class AnimationConfig(BaseModel):
    """Timer rates and spring tuning for the wizard animations."""

    model_config = ConfigDict(extra="allow")

    enabled: bool = True
    reveal_interval_ms: int = Field(default=150, ge=10, le=2000)
    reveal_columns: int = Field(default=3, ge=1)
    smooth_fps: int = Field(default=60, ge=1, le=240)

    # Slightly under-damped for a subtle bounce.
    entrance_frequency: float = Field(default=5.0, gt=0.0)
    entrance_damping: float = Field(default=0.7, ge=0.0)

    # Fast with minimal overshoot.
    transition_frequency: float = Field(default=8.0, gt=0.0)
    transition_damping: float = Field(default=0.85, ge=0.0)

    settle_tick_ceiling: int = Field(default=5000, ge=1)


# =============================================================================
# Root
# =============================================================================


class Settings(BaseModel):
    """Root settings model."""

    model_config = ConfigDict(extra="allow")

    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig)
    animation: AnimationConfig = Field(default_factory=AnimationConfig)
    catalog_path: Path | None = None
