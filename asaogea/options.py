"""Engine start-up options."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class RenderingOption:
    """Rendering settings: validation layers and number of frames in flight."""

    validation_layers: bool = True
    image_count: int = 2


@dataclass
class WindowOptions:
    """Settings for a window."""

    name: str = "Asaogea"


@dataclass
class Options:
    """All options given to the engine."""

    rendering: RenderingOption = field(default_factory=RenderingOption)
    main_window: WindowOptions = field(default_factory=WindowOptions)