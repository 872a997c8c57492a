import logging
import random
from collections import namedtuple

from board import (
    DIGITS,
    EMPTY,
    SIZE,
    clone_board,
    count_clues,
    create_empty_board,
    find_empty,
    is_safe,
)
from difficulty import DIFFICULTY_CLUE_RANGES, parse_difficulty, pick_target_clues

log = logging.getLogger(__name__)

# Counting stops here: one solution proves uniqueness, two disprove it.
SOLUTION_LIMIT = 2


class BoardGenerationError(RuntimeError):
    pass


class PuzzleResult(namedtuple("PuzzleResult", ["puzzle", "solution", "difficulty"])):
    __slots__ = ()

    @property
    def clue_count(self):
        return count_clues(self.puzzle)

    def to_dict(self):
        return {
            "difficulty": self.difficulty,
            "clues": self.clue_count,
            "puzzle": self.puzzle,
            "solution": self.solution,
        }


class SudokuGenerator:
    def __init__(self, rng=None):
        self.rng = rng if rng is not None else random.Random()

    def generate(self, difficulty):
        solution = self.generate_complete_board()
        return self.carve(solution, difficulty)

    def generate_complete_board(self):
        board = create_empty_board()
        if not self.fill(board, 0):
            raise BoardGenerationError("Failed to generate a complete Sudoku board")
        return board

    def fill(self, board, cell_index=0):
        """
        Fills every empty cell from `cell_index` onwards in row-major order,
        trying digits in a fresh random order per cell.

        Returns True once the board is complete. On failure the current cell
        is left empty so the caller can backtrack.
        """
        if cell_index >= SIZE * SIZE:
            return True

        row, col = divmod(cell_index, SIZE)
        if board[row][col] != EMPTY:
            return self.fill(board, cell_index + 1)

        nums = list(DIGITS)
        self.rng.shuffle(nums)

        for num in nums:
            if is_safe(board, row, col, num):
                board[row][col] = num
                if self.fill(board, cell_index + 1):
                    return True

        board[row][col] = EMPTY  # Backtrack
        return False

    def count_solutions(self, board, limit):
        """
        Counts completions of `board`, giving up as soon as `limit` is reached.
        The board is restored before returning.
        """
        find = find_empty(board)
        if not find:
            return 1
        row, col = find

        count = 0
        for num in DIGITS:
            if not is_safe(board, row, col, num):
                continue

            board[row][col] = num
            count += self.count_solutions(board, limit - count)
            board[row][col] = EMPTY

            if count >= limit:
                break
        return count

    def carve(self, solution, difficulty):
        difficulty = parse_difficulty(difficulty)
        clue_range = DIFFICULTY_CLUE_RANGES[difficulty]
        desired_clues = pick_target_clues(clue_range, self.rng)
        log.debug("Carving %s puzzle, target %d clues", difficulty, desired_clues)

        puzzle = clone_board(solution)
        current_clues = SIZE * SIZE
        rejected = 0

        cells = [(r, c) for r in range(SIZE) for c in range(SIZE)]
        self.rng.shuffle(cells)

        for r, c in cells:
            if current_clues <= desired_clues:
                break

            backup = puzzle[r][c]
            if backup == EMPTY:
                continue
            if current_clues - 1 < clue_range.min_clues:
                continue

            puzzle[r][c] = EMPTY
            board_copy = clone_board(puzzle)

            if self.count_solutions(board_copy, SOLUTION_LIMIT) == 1:
                current_clues -= 1
            else:
                puzzle[r][c] = backup
                rejected += 1

        log.debug(
            "Carved %s puzzle with %d clues (target %d, %d removals rejected)",
            difficulty, current_clues, desired_clues, rejected,
        )
        return PuzzleResult(puzzle=puzzle, solution=solution, difficulty=difficulty)
