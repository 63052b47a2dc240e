"""
Core functionality for the sliding-tile merge puzzle, including row reduction, board rotation and tile spawning.
"""

from numpy import argwhere, ndarray, rot90
from numpy.random import Generator

# ##>: Tile spawn probabilities (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}


def compress_row(row: ndarray) -> bool:
    """
    Slide every non-zero value of a row towards its leading edge.

    Parameters
    ----------
    row : ndarray
        A 1D view on one row of the board. **Modified in-place.**

    Returns
    -------
    bool
        True if at least one value was displaced, False otherwise.

    Notes
    -----
    - The relative order of the non-zero values is preserved.
    - Trailing cells are set to zero.
    """
    changed = False
    count = 0
    for i in range(len(row)):
        if row[i] != 0:
            if row[count] != row[i]:
                changed = True
            row[count] = row[i]
            count += 1
    row[count:] = 0
    return changed


def merge_row(row: ndarray) -> list[int]:
    """
    Merge adjacent equal values of a compressed row, from left to right.

    Parameters
    ----------
    row : ndarray
        A 1D view on one row of the board. **Modified in-place.**

    Returns
    -------
    list[int]
        The values produced by each merge, in scan order. Empty if nothing merged.

    Notes
    -----
    - The leading cell of a pair is doubled and the trailing cell is emptied.
    - Each cell takes part in at most one merge: once emptied, a trailing cell
      can no longer match its right neighbour.
    """
    merged = []
    for i in range(len(row) - 1):
        if row[i] != 0 and row[i] == row[i + 1]:
            row[i] *= 2
            row[i + 1] = 0
            merged.append(int(row[i]))
    return merged


def slide_row(row: ndarray) -> tuple[bool, list[int]]:
    """
    Apply the compress, merge, compress sequence to a single row.

    Parameters
    ----------
    row : ndarray
        A 1D view on one row of the board. **Modified in-place.**

    Returns
    -------
    changed : bool
        True if any of the three passes changed the row.
    merged : list[int]
        The values produced by merges.

    Examples
    --------
    >>> import numpy as np
    >>> row = np.array([0, 2, 2, 2])
    >>> slide_row(row)
    (True, [4])
    >>> row
    array([4, 2, 0, 0])
    """
    changed = compress_row(row)
    merged = merge_row(row)
    # ##: Close the gaps left by merging.
    changed = compress_row(row) or changed
    return changed or bool(merged), merged


def slide_left(board: ndarray) -> tuple[int, list[int]]:
    """
    Slide every row of the board to the left.

    Parameters
    ----------
    board : ndarray
        The game board represented as a 2D NumPy array. **Modified in-place.**

    Returns
    -------
    changed_rows : int
        Number of rows that changed.
    merged : list[int]
        Values produced by all merges, row by row.

    Notes
    -----
    For other directions, rotate the board before calling this function.
    """
    changed_rows = 0
    merged = []
    for row in board:
        changed, values = slide_row(row)
        changed_rows += int(changed)
        merged.extend(values)
    return changed_rows, merged


def rotate_clockwise(board: ndarray, times: int = 1) -> ndarray:
    """
    Rotate the board clockwise by quarter turns.

    Parameters
    ----------
    board : ndarray
        The game board.
    times : int, optional
        Number of quarter turns (default is 1).

    Returns
    -------
    ndarray
        A new array where the value previously at (x, y) sits at (y, N-1-x) for each turn.
    """
    return rot90(board, k=-times).copy()


def empty_cells(board: ndarray) -> list[tuple[int, int]]:
    """
    Positions of the empty cells, in row-major order.
    """
    return [(int(cell[0]), int(cell[1])) for cell in argwhere(board == 0)]


def spawn_tile(
    board: ndarray, generator: Generator, probabilities: dict[int, float] | None = None
) -> tuple[int, int] | None:
    """
    Place a new tile on a random empty cell.

    Parameters
    ----------
    board : ndarray
        The game board. **Modified in-place.**
    generator : Generator
        Random number generator used for both the cell and the value.
    probabilities : dict[int, float], optional
        Spawn probability of each tile value (default is ``TILE_SPAWN_PROBS``).

    Returns
    -------
    tuple[int, int] | None
        The position of the new tile, or None if the board is full.
    """
    probabilities = probabilities or TILE_SPAWN_PROBS

    # ##: Only if there are still available places.
    available = empty_cells(board)
    if not available:
        return None

    cell = available[int(generator.integers(len(available)))]
    board[cell] = int(generator.choice(list(probabilities), p=list(probabilities.values())))
    return cell
