"""Random computer choice implementation"""
import random
from typing import Optional

from rps_engine.application.ports.chooser_port import ChooserPort
from rps_engine.domain.entities.choice import Choice

CHOICES = list(Choice)


class RandomChooser(ChooserPort):
    """Draws uniformly from the three choices"""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.SystemRandom()

    def choose(self) -> Choice:
        return self.rng.choice(CHOICES)
