"""
Outcome of a trial move, used to rank candidate moves.
"""

from dataclasses import dataclass, field

from .gamemove import Move


@dataclass(frozen=True, order=True)
class MoveEfficiency:
    """
    Result of trying a move on the board.

    Outcomes compare by number of empty tiles first, then by score. The move itself does not take part in the
    ordering.

    Attributes
    ----------
    empty_tiles : int
        Number of empty tiles after the move, or -1 if the move left the board unchanged.
    score : int
        Score after the move, or 0 if the move left the board unchanged.
    move : Move
        The move that was tried.
    """

    empty_tiles: int
    score: int
    move: Move = field(compare=False)

    @classmethod
    def unchanged(cls, move: Move) -> 'MoveEfficiency':
        """
        Outcome of a move that did not change the board, ranked below every real outcome.
        """
        return cls(empty_tiles=-1, score=0, move=move)
