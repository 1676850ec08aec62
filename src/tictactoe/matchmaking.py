"""
Matchmaking: decide which symbol a newly joined participant plays with.

1. No slot filled yet --> coin flip decides (the game is not startable yet).
2. One slot filled --> the other symbol (the game becomes startable).
3. Both filled --> no slot available, the join is rejected.
"""

import random
from dataclasses import dataclass
from typing import Callable, Optional

from src.core.exceptions import NoSlotAvailableError
from src.core.shared_types import Player

CoinFlip = Callable[[], Player]


def random_coin_flip(rng: Optional[random.Random] = None) -> CoinFlip:
    """Unbiased 50/50 draw between the two symbols. Supply a seeded Random for reproducible games."""
    source = rng or random.Random()

    def flip() -> Player:
        return source.choice([Player.CROSSES, Player.CIRCLES])

    return flip


def fixed_coin_flip(player: Player) -> CoinFlip:
    """Always lands on the same side."""
    return lambda: player


@dataclass(frozen=True)
class JoinDecision:
    player: Player
    startable: bool


def assign_symbol(
    crosses_id: Optional[str], circles_id: Optional[str], coin_flip: CoinFlip
) -> JoinDecision:
    crosses_free = crosses_id is None
    circles_free = circles_id is None

    if crosses_free and circles_free:
        return JoinDecision(player=coin_flip(), startable=False)

    if crosses_free:
        return JoinDecision(player=Player.CROSSES, startable=True)

    if circles_free:
        return JoinDecision(player=Player.CIRCLES, startable=True)

    raise NoSlotAvailableError("Cannot join this game. Both player slots are taken.")
