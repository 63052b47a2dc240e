"""
Game move utilities for the merge puzzle, providing the move enumeration and functions for determining legal
moves and the terminal state.
"""

from enum import IntEnum

from numpy import ndarray


class Move(IntEnum):
    """
    The four directional moves.

    Each move is applied by rotating the board clockwise ``turns`` times, sliding left, then rotating back to the
    original orientation.
    """

    LEFT = 0
    RIGHT = 1
    UP = 2
    DOWN = 3

    @property
    def turns(self) -> int:
        """
        Number of clockwise quarter turns that bring this move back to a left slide.
        """
        return _TURNS[self]

    @classmethod
    def from_key(cls, key: str) -> 'Move':
        """
        Get a move from a key name.

        Parameters
        ----------
        key : str
            One of "left", "right", "up" or "down" (case-insensitive).

        Returns
        -------
        Move
            The matching move.

        Raises
        ------
        ValueError
            If the key does not name a move.
        """
        try:
            return cls[key.strip().upper()]
        except KeyError:
            raise ValueError(f'Unknown move: {key!r}') from None


_TURNS = {Move.LEFT: 0, Move.RIGHT: 2, Move.UP: 3, Move.DOWN: 1}


def legal_moves_mask(state: ndarray) -> tuple[bool, bool, bool, bool]:
    """
    Get a boolean mask for all four directions in a single pass.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    tuple[bool, bool, bool, bool]
        Mask for (left, right, up, down) where True means the move changes the board.
    """
    # ##>: Compute horizontal adjacency once for left/right.
    left_cols, right_cols = state[:, :-1], state[:, 1:]
    h_can_merge = (left_cols != 0) & (left_cols == right_cols)

    # ##>: Compute vertical adjacency once for up/down.
    top_rows, bottom_rows = state[:-1, :], state[1:, :]
    v_can_merge = (top_rows != 0) & (top_rows == bottom_rows)

    # ##>: Check slide conditions per direction.
    left = (left_cols == 0) & (right_cols != 0)
    right = (right_cols == 0) & (left_cols != 0)
    up = (top_rows == 0) & (bottom_rows != 0)
    down = (bottom_rows == 0) & (top_rows != 0)

    return (
        bool(left.any() or h_can_merge.any()),
        bool(right.any() or h_can_merge.any()),
        bool(up.any() or v_can_merge.any()),
        bool(down.any() or v_can_merge.any()),
    )


def legal_moves(state: ndarray) -> list[Move]:
    """
    Determine the moves that would change the board.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    list[Move]
        Legal moves, in enumeration order.
    """
    mask = legal_moves_mask(state)
    return [move for move in Move if mask[move]]


def can_move(state: ndarray) -> bool:
    """
    Check if any move is still possible.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    bool
        False only when the board is full and no two adjacent cells hold the same value.
    """
    if (state == 0).any():
        return True
    return bool((state[:-1] == state[1:]).any() or (state[:, :-1] == state[:, 1:]).any())
