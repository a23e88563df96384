"""Round resolution rules"""
from rps_engine.domain.entities.choice import BEATS, Choice, Result


def resolve(player: Choice, computer: Choice) -> Result:
    """Resolve a round from the player's point of view"""
    if player == computer:
        return Result.TIE
    if BEATS[player] == computer:
        return Result.WIN
    return Result.LOSS
