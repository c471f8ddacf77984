"""DLC and post-game content filtering."""

from typing import Iterable

from ..core.models import Creature

# Episode Pack 1 (458-463), Pack 2 (464-468), Pack 3 (469-473)
DLC_NUMBERS = frozenset(str(n) for n in range(458, 474))

# Chronomon Holy Mode, Chronomon Destroy Mode
POST_GAME_NUMBERS = frozenset({"474", "475"})


def is_dlc(creature: Creature) -> bool:
    return creature.is_dlc or creature.number in DLC_NUMBERS


def is_post_game(creature: Creature) -> bool:
    return creature.is_post_game or creature.number in POST_GAME_NUMBERS


def is_content_allowed(
    creature: Creature, include_dlc: bool = True, include_post_game: bool = True
) -> bool:
    if not include_dlc and is_dlc(creature):
        return False
    if not include_post_game and is_post_game(creature):
        return False
    return True


def filter_by_content(
    creatures: Iterable[Creature],
    include_dlc: bool = True,
    include_post_game: bool = True,
) -> list[Creature]:
    return [
        c for c in creatures if is_content_allowed(c, include_dlc, include_post_game)
    ]
