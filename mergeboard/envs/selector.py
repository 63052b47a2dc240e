# -*- coding: utf-8 -*-
"""
One-ply greedy move selection.
"""
import logging
from typing import TYPE_CHECKING

from mergeboard.core.efficiency import MoveEfficiency
from mergeboard.core.gamemove import Move

if TYPE_CHECKING:
    from mergeboard.envs.engine import BoardEngine

logger = logging.getLogger(__name__)

# ##: Fixed trial order, also used to break exact ties.
TRIAL_ORDER = (Move.LEFT, Move.RIGHT, Move.UP, Move.DOWN)


def evaluate_move(engine: 'BoardEngine', move: Move) -> MoveEfficiency:
    """
    Try a move on the engine and measure its outcome.

    Parameters
    ----------
    engine : BoardEngine
        The engine to try the move on. Its board, score and max tile are restored before returning.
    move : Move
        The move to try.

    Returns
    -------
    MoveEfficiency
        Empty tiles and score after the move, or the unchanged sentinel if the board did not change.
    """
    with engine.trial():
        engine.move(move)
        if not engine.has_board_changed():
            return MoveEfficiency.unchanged(move)
        return MoveEfficiency(empty_tiles=engine.empty_tiles, score=engine.score, move=move)


def choose_move(engine: 'BoardEngine') -> Move:
    """
    Choose the move leaving the most empty tiles, then the highest score.

    Every candidate is evaluated from the same position. Exact ties go to the earliest move of ``TRIAL_ORDER``.

    Parameters
    ----------
    engine : BoardEngine
        The engine to choose a move for. Left in the state it was given.

    Returns
    -------
    Move
        The chosen move.
    """
    outcomes = [evaluate_move(engine, move) for move in TRIAL_ORDER]
    best = max(outcomes)
    logger.debug('Auto-move outcomes %s, chose %s', outcomes, best.move.name)
    return best.move
