from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields, is_dataclass
from typing import Any, Dict, Optional

import numpy as np

from renderer import RenderStyle


@dataclass
class GridConfig:
    width: int = 30
    height: int = 30
    alive_probability: float = 0.2
    seed: Optional[int] = None

    def rng(self) -> np.random.Generator:
        return np.random.default_rng(self.seed)


@dataclass
class RenderConfig:
    canvas_size: int = 600
    alive_color: str = "yellow"
    dead_color: str = "white"
    stroke_color: str = "black"
    stroke_width: float = 1.5
    margin: float = 2

    def style(self) -> RenderStyle:
        return RenderStyle(
            alive_color=self.alive_color,
            dead_color=self.dead_color,
            stroke_color=self.stroke_color,
            stroke_width=self.stroke_width,
            margin=self.margin,
        )


@dataclass
class LoopConfig:
    interval_ms: int = 16  # roughly one frame at 60 Hz
    start_running: bool = True


@dataclass
class AppConfig:
    grid: GridConfig = field(default_factory=GridConfig)
    render: RenderConfig = field(default_factory=RenderConfig)
    loop: LoopConfig = field(default_factory=LoopConfig)
    log_level: str = "INFO"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def update_from_mapping(self, data: Dict[str, Any]) -> None:
        """Merge settings from a nested mapping into the config."""
        # Only declared fields are settable, never methods such as to_dict
        known = {f.name for f in fields(self)}
        for section_name, section_values in data.items():
            if section_name not in known:
                continue
            section = getattr(self, section_name)
            if not is_dataclass(section):
                # Top-level scalars such as log_level
                if not isinstance(section_values, dict):
                    setattr(self, section_name, section_values)
                continue
            if not isinstance(section_values, dict):
                continue
            section_keys = {f.name for f in fields(section)}
            for key, value in section_values.items():
                if key in section_keys:
                    setattr(section, key, value)
