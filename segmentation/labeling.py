"""
Motivational labeling for tier progress.

Applies deterministic threshold rules, in a fixed priority order, to a
reseller's upgrade and maintain progress and returns the message shown
next to the reseller. No I/O.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Motivation:
    """
    Motivational message selected for one progress pair.
    """

    code: str
    message: str
    kind: str


# ------------------------------------------------------------------
# Thresholds (percent of the tier floor)
# ------------------------------------------------------------------

_UPGRADE_FINAL_STRETCH = Decimal("95")
_UPGRADE_EXCELLENT = Decimal("80")
_UPGRADE_GOOD = Decimal("60")

_MAINTAIN_SECURED = Decimal("100")
_MAINTAIN_ALMOST = Decimal("80")
_MAINTAIN_GOOD_PACE = Decimal("50")
_MAINTAIN_INTENSIFY = Decimal("30")

# ------------------------------------------------------------------
# Kinds
# ------------------------------------------------------------------

KIND_SUCCESS = "success"
KIND_POSITIVE = "positive"
KIND_CAUTION = "caution"
KIND_ALERT = "alert"
KIND_URGENT = "urgent"

# ------------------------------------------------------------------
# Messages
# ------------------------------------------------------------------

FINAL_STRETCH = Motivation("final_stretch", "Quase lá! Reta final para subir!", KIND_SUCCESS)
EXCELLENT_PACE = Motivation("excellent_pace", "Excelente ritmo! Promoção à vista!", KIND_SUCCESS)
GOOD_PROGRESS = Motivation("good_progress", "Bom progresso! Continue assim!", KIND_POSITIVE)
TIER_SECURED = Motivation("tier_secured", "Segmento garantido! Vamos subir?", KIND_POSITIVE)
ALMOST_MAINTAINING = Motivation("almost_maintaining", "Quase mantendo! Foco no objetivo!", KIND_CAUTION)
ACCELERATE = Motivation("accelerate", "Ritmo bom, vamos acelerar!", KIND_CAUTION)
INTENSIFY = Motivation("intensify", "Hora de intensificar! Bora!", KIND_ALERT)
MUST_FOCUS = Motivation("must_focus", "Precisamos focar! Vamos juntas!", KIND_URGENT)


class MotivationLabeler:
    """
    Picks the motivational message for a reseller's progress.

    Responsibilities:
        - Evaluate the threshold ladder in priority order.

    Not responsible for:
        - Computing progress (that is the segmentation engine's job).
    """

    def label(self, progress_upgrade: Decimal, progress_maintain: Decimal) -> Motivation:
        """
        Apply the ladder and return the first matching message.

        Priority:
            1. upgrade >= 95   -> final stretch
            2. upgrade >= 80   -> excellent pace
            3. upgrade >= 60   -> good progress
            4. maintain >= 100 -> tier secured
            5. maintain >= 80  -> almost maintaining
            6. maintain >= 50  -> accelerate
            7. maintain >= 30  -> intensify
            8. otherwise       -> must focus

        Args:
            progress_upgrade:  Percent of the next tier floor reached (0-100).
            progress_maintain: Percent of the current tier floor reached (0-100).
        """
        if progress_upgrade >= _UPGRADE_FINAL_STRETCH:
            return FINAL_STRETCH
        if progress_upgrade >= _UPGRADE_EXCELLENT:
            return EXCELLENT_PACE
        if progress_upgrade >= _UPGRADE_GOOD:
            return GOOD_PROGRESS
        if progress_maintain >= _MAINTAIN_SECURED:
            return TIER_SECURED
        if progress_maintain >= _MAINTAIN_ALMOST:
            return ALMOST_MAINTAINING
        if progress_maintain >= _MAINTAIN_GOOD_PACE:
            return ACCELERATE
        if progress_maintain >= _MAINTAIN_INTENSIFY:
            return INTENSIFY
        return MUST_FOCUS
