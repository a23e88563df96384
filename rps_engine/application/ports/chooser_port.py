"""Computer choice port (interface)"""
from abc import ABC, abstractmethod

from rps_engine.domain.entities.choice import Choice


class ChooserPort(ABC):
    """Port for drawing the computer's choice"""

    @abstractmethod
    def choose(self) -> Choice:
        """Draw one choice"""
        pass
