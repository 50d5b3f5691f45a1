from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict


# ---------- Core shape model ----------

@dataclass(eq=False)
class Shape:
    # geometry (left/top are the stored origin point, not necessarily the corner)
    left: float
    top: float
    width: float
    height: float
    scale_x: float = 1.0
    scale_y: float = 1.0
    origin_x: str = "left"          # left|center|right
    origin_y: str = "top"           # top|center|bottom

    # look
    kind: str = "rect"              # "rect" | "ellipse"
    fill_color: str = "#4f81bd"
    stroke_color: str = "#1f3f66"
    stroke_px: float = 1.0
    name: str = ""

    # arbitrary extras for forward-compat
    data: Dict[str, Any] = field(default_factory=dict)

    # ---- demo loading ----
    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "Shape":
        return Shape(**d)
