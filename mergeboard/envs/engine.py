"""Board engine for the sliding-tile merge puzzle."""

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional

from numpy import array_equal, count_nonzero, int64, ndarray, zeros
from numpy.random import Generator, default_rng

from mergeboard.config import EngineConfiguration
from mergeboard.core.gameboard import rotate_clockwise, slide_left, spawn_tile
from mergeboard.core.gamemove import Move, can_move, legal_moves
from mergeboard.envs.selector import choose_move

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Snapshot:
    """
    Copy of the board and score taken right before a move.
    """

    tiles: ndarray
    score: int


class BoardEngine:
    """
    Rules engine of the merge puzzle.

    The engine owns the grid, applies directional moves, keeps track of the score and of the highest tile ever
    produced by a merge, and keeps one level of undo history. Every public directional move captures a snapshot
    before mutating the grid, so the last move can always be rolled back.
    """

    def __init__(self, config: Optional[EngineConfiguration] = None, generator: Optional[Generator] = None):
        """
        Initialize the engine and place the initial tiles.

        Parameters
        ----------
        config : EngineConfiguration, optional
            Engine configuration (default is a 4x4 board with two initial tiles).
        generator : Generator, optional
            Random number generator used for spawns and random moves. Built from ``config.seed`` when missing.
        """
        self._config = config or EngineConfiguration()
        self._generator = generator if generator is not None else default_rng(self._config.seed)

        self._tiles: ndarray = zeros((self.size, self.size), dtype=int64)
        self._score = 0
        self._max_tile = 0
        self._snapshot: Optional[Snapshot] = None

        self.reset()

    @property
    def size(self) -> int:
        """Width and height of the grid."""
        return self._config.size

    @property
    def tiles(self) -> ndarray:
        """
        Read-only view of the tile values, indexed by (row, column).
        """
        view = self._tiles.view()
        view.flags.writeable = False
        return view

    @property
    def score(self) -> int:
        return self._score

    @property
    def max_tile(self) -> int:
        """Largest value ever produced by a merge since the last reset."""
        return self._max_tile

    @property
    def empty_tiles(self) -> int:
        return int(self._tiles.size - count_nonzero(self._tiles))

    @property
    def snapshot(self) -> Optional[Snapshot]:
        """The pending undo snapshot, if any."""
        return self._snapshot

    def reset(self, seed: Optional[int] = None) -> ndarray:
        """
        Start a new game.

        Parameters
        ----------
        seed : int, optional
            Reseed the random number generator before placing the initial tiles.

        Returns
        -------
        ndarray
            Read-only view of the new board.
        """
        if seed is not None:
            self._generator = default_rng(seed)

        self._tiles = zeros((self.size, self.size), dtype=int64)
        for _ in range(self._config.initial_tiles):
            self.add_tile()
        self._score = 0
        self._max_tile = 0
        self._snapshot = None
        return self.tiles

    def add_tile(self) -> Optional[tuple[int, int]]:
        """
        Spawn a tile on a random empty cell. Does nothing on a full board.

        Returns
        -------
        tuple[int, int] | None
            Position of the new tile, or None if the board is full.
        """
        cell = spawn_tile(self._tiles, self._generator, self._config.spawn_probabilities)
        if cell is not None:
            logger.debug('Spawned %d at %s', self._tiles[cell], cell)
        return cell

    def _save_state(self) -> None:
        self._snapshot = Snapshot(tiles=self._tiles.copy(), score=self._score)

    def rollback(self) -> bool:
        """
        Restore the board and score saved before the last move.

        Returns
        -------
        bool
            True if a snapshot was restored, False if there was nothing to undo.
        """
        if self._snapshot is None:
            logger.debug('Rollback requested without history')
            return False

        self._tiles = self._snapshot.tiles
        self._score = self._snapshot.score
        self._snapshot = None
        return True

    def has_board_changed(self) -> bool:
        """
        Check whether the board differs from the pending snapshot.
        """
        if self._snapshot is None:
            return False
        return not array_equal(self._tiles, self._snapshot.tiles)

    def _apply(self, direction: Move) -> bool:
        # ##: Conjugate the left slide by clockwise rotations.
        turns = direction.turns
        board = rotate_clockwise(self._tiles, turns) if turns else self._tiles
        changed_rows, merged = slide_left(board)
        self._tiles = rotate_clockwise(board, 4 - turns) if turns else board

        self._score += sum(merged)
        self._max_tile = max([self._max_tile, *merged])

        logger.debug('Move %s: %d row(s) changed, merged %s', direction.name, changed_rows, merged)
        if changed_rows > 0:
            self.add_tile()
        return changed_rows > 0

    def move(self, direction: Move) -> bool:
        """
        Apply a directional move.

        A snapshot is taken before the grid is touched. If at least one row changed, one new tile is spawned.

        Parameters
        ----------
        direction : Move
            The move to apply.

        Returns
        -------
        bool
            True if the board changed.
        """
        self._save_state()
        return self._apply(Move(direction))

    def left(self) -> bool:
        return self.move(Move.LEFT)

    def right(self) -> bool:
        return self.move(Move.RIGHT)

    def up(self) -> bool:
        return self.move(Move.UP)

    def down(self) -> bool:
        return self.move(Move.DOWN)

    def can_move(self) -> bool:
        """
        Check if any move is possible. False means the game is over.
        """
        return can_move(self._tiles)

    def legal_moves(self) -> list[Move]:
        """Moves that would change the board, without applying any of them."""
        return legal_moves(self._tiles)

    @contextmanager
    def trial(self) -> Iterator['BoardEngine']:
        """
        Context in which moves are tried and then undone.

        On exit the board and score are rolled back, and the max tile and the pending snapshot are restored, so a
        trial leaves no trace apart from the random draws it consumed.
        """
        max_tile, snapshot = self._max_tile, self._snapshot
        try:
            yield self
        finally:
            self.rollback()
            self._max_tile, self._snapshot = max_tile, snapshot

    def auto_move(self) -> Move:
        """
        Apply the move chosen by the one-ply greedy heuristic.

        Returns
        -------
        Move
            The committed move.
        """
        direction = choose_move(self)
        self.move(direction)
        return direction

    def random_move(self) -> Move:
        """
        Apply a move drawn uniformly among the four directions.

        Returns
        -------
        Move
            The applied move.
        """
        direction = Move(int(self._generator.integers(len(Move))))
        self.move(direction)
        return direction

    def render(self) -> None:
        """
        Render the game board. This method prints the current state of the game board to the console.
        """
        for row in self._tiles.tolist():
            print(' \t'.join(map(str, row)))
