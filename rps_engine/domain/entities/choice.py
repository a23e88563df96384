"""Rock-Paper-Scissors choices and results"""
from enum import Enum
from typing import Dict


class Choice(str, Enum):
    """A hand a player (or the computer) can throw"""

    ROCK = "rock"
    PAPER = "paper"
    SCISSORS = "scissors"

    @classmethod
    def values(cls) -> list:
        return [choice.value for choice in cls]


class Result(str, Enum):
    """Outcome of a round, always from the player's side"""

    WIN = "win"
    LOSS = "loss"
    TIE = "tie"


# Each choice maps to the one it beats
BEATS: Dict[Choice, Choice] = {
    Choice.ROCK: Choice.SCISSORS,
    Choice.PAPER: Choice.ROCK,
    Choice.SCISSORS: Choice.PAPER,
}
