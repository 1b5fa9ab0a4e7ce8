"""Advisory text shown to the operator.

Strings are opaque display labels; nothing in the simulation branches on
them.
"""
from __future__ import annotations

from dataclasses import dataclass

from relining.types import Stage, SubPhase

OPENING = "Step 1: tear out the old lining. Crew, stand by to start work!"
DEMOLISH_DONE = "Demolition complete! Switch to [2] the cleaner and clear the debris."
CONSTRUCT_START = "Entering casting: build from the inside out, one layer at a time."
MOLD_DONE = "Mold is set! Switch to [4] the nozzle and inject refractory."
POUR_DONE = "Pour is full! Switch to [3] the arm and strip the mold."
LAYER_DONE = "Layer {layer} complete! Get ready to set the next mold."
LAYERS_DONE = "All layers cast! Switch to [5] the heater for the bake-out."
VICTORY = "Bake-out complete. The furnace is relined."


@dataclass
class Notice:
    text: str
    remaining: int

    def tick(self) -> bool:
        """Count down one tick. Returns False once the notice has expired."""
        self.remaining -= 1
        return self.remaining > 0


def transition_notice(old_key: str, new_key: str, layer: int = 0) -> str | None:
    """Notice for an automatic transition from ``old_key`` to ``new_key``.

    ``layer`` is the layer index that was just finished when a new layer
    starts.
    """
    if new_key == "clean":
        return DEMOLISH_DONE
    if new_key == "construct.mold" and old_key == "clean":
        return CONSTRUCT_START
    if new_key == "construct.pour":
        return MOLD_DONE
    if new_key == "construct.demold":
        return POUR_DONE
    if new_key == "construct.mold" and old_key == "construct.demold":
        return LAYER_DONE.format(layer=layer + 1)
    if new_key == "heat":
        return LAYERS_DONE
    if new_key == "victory":
        return VICTORY
    return None


def hint_text(stage: Stage, sub_phase: SubPhase | None = None, layer: int = 0) -> str:
    if stage is Stage.DEMOLISH:
        return "Step 1: break out the old refractory lining with [1] the breaker"
    if stage is Stage.CLEAN:
        return "Step 2: clear the debris with [2] the cleaner"
    if stage is Stage.CONSTRUCT and sub_phase is not None:
        n = layer + 1
        if sub_phase is SubPhase.MOLD:
            return f"Layer {n}/4 - switch to [3] the arm to set the mold"
        if sub_phase is SubPhase.POUR:
            return f"Layer {n}/4 - switch to [4] the nozzle to pour"
        return f"Layer {n}/4 - switch to [3] the arm to strip the mold"
    if stage is Stage.HEAT:
        return "Step 5: bake out the whole lining with [5] the heater"
    return "Hint: move with the stick, hold the action key to work"
