"""Tool catalogue and per-stage tool requirements."""
from __future__ import annotations

from dataclasses import dataclass

from relining.types import Stage, SubPhase

DRILL = 0
VACUUM = 1
ARM = 2
NOZZLE = 3
HEATER = 4

NO_TOOL = -1


@dataclass(frozen=True)
class ToolSpec:
    id: str
    name: str
    desc: str
    color: tuple[int, int, int]
    key: str


TOOLS: tuple[ToolSpec, ...] = (
    ToolSpec("DRILL", "Hydraulic breaker", "Demolish old lining", (239, 83, 80), "1"),
    ToolSpec("VACUUM", "High-pressure cleaner", "Remove debris", (171, 71, 188), "2"),
    ToolSpec("ARM", "Manipulator arm", "Set / strip molds", (255, 167, 38), "3"),
    ToolSpec("NOZZLE", "Casting nozzle", "Inject refractory", (41, 182, 246), "4"),
    ToolSpec("HEATER", "Bake-out heater", "Cure the lining", (255, 112, 67), "5"),
)

# Tool required to work each construction sub-phase.
SUB_PHASE_TOOLS: dict[SubPhase, int] = {
    SubPhase.MOLD: ARM,
    SubPhase.POUR: NOZZLE,
    SubPhase.DEMOLD: ARM,
}


def is_valid_tool(index: int) -> bool:
    return 0 <= index < len(TOOLS)


def suggested_tool(stage: Stage, sub_phase: SubPhase | None = None) -> int:
    """Tool index the current stage calls for, or NO_TOOL."""
    if stage is Stage.DEMOLISH:
        return DRILL
    if stage is Stage.CLEAN:
        return VACUUM
    if stage is Stage.CONSTRUCT and sub_phase is not None:
        return SUB_PHASE_TOOLS[sub_phase]
    if stage is Stage.HEAT:
        return HEATER
    return NO_TOOL
