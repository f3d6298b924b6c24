"""
Reveal Schedule

Turns an evaluated row into timed visual-update commands for the browser.
Each tile flips in turn and takes its color halfway through the flip; once
the last flip has finished, the keyboard is recolored and the game end
message (if any) is shown.
"""

from dataclasses import dataclass, asdict, field
from typing import Dict, List, Optional

from ..config.game_settings import FLIP_DURATION_MS, FLIP_HALF_MS, FLIP_STAGGER_MS
from ..models.game import GameStatus, GuessOutcome


@dataclass
class RevealStep:
    delay_ms: int
    action: str  # "flip", "color" or "finish"
    tile: Optional[int] = None
    result: Optional[str] = None
    key_updates: Dict[str, str] = field(default_factory=dict)
    status: Optional[str] = None


def build_reveal_schedule(outcome: GuessOutcome,
                          final_status: GameStatus,
                          stagger_ms: int = FLIP_STAGGER_MS,
                          half_ms: int = FLIP_HALF_MS,
                          duration_ms: int = FLIP_DURATION_MS) -> List[RevealStep]:
    """
    Builds the ordered list of reveal steps for one submitted row.

    Args:
        outcome: Evaluation of the submitted row
        final_status: Game status after the row was scored

    Returns:
        List[RevealStep] sorted by delay
    """
    steps: List[RevealStep] = []
    delay = 0
    for tile, result in enumerate(outcome.results):
        steps.append(RevealStep(delay_ms=delay, action="flip", tile=tile))
        steps.append(RevealStep(delay_ms=delay + half_ms, action="color", tile=tile, result=result.value))
        delay += stagger_ms

    steps.append(RevealStep(
        delay_ms=delay + duration_ms,
        action="finish",
        key_updates={letter: result.value for letter, result in outcome.key_updates.items()},
        status=final_status.value,
    ))

    steps.sort(key=lambda step: step.delay_ms)
    return steps


def schedule_to_dicts(steps: List[RevealStep]) -> List[Dict]:
    return [asdict(step) for step in steps]
