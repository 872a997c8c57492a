SIZE = 9
BOX_SIZE = 3
EMPTY = 0
DIGITS = tuple(range(1, SIZE + 1))


def create_empty_board():
    return [[EMPTY for _ in range(SIZE)] for _ in range(SIZE)]


def clone_board(board):
    return [row[:] for row in board]


def find_empty(board):
    for row in range(SIZE):
        for col in range(SIZE):
            if board[row][col] == EMPTY:
                return (row, col)
    return None


def is_safe(board, row, col, value):
    """
    Checks whether `value` can go at (row, col) without repeating in the
    row, the column or the 3x3 box. The cell's own content is not consulted.
    """
    for i in range(SIZE):
        if i != col and board[row][i] == value:
            return False
        if i != row and board[i][col] == value:
            return False

    box_row = (row // BOX_SIZE) * BOX_SIZE
    box_col = (col // BOX_SIZE) * BOX_SIZE
    for r in range(box_row, box_row + BOX_SIZE):
        for c in range(box_col, box_col + BOX_SIZE):
            if board[r][c] == value and (r, c) != (row, col):
                return False
    return True


def count_clues(board):
    return sum(1 for row in board for value in row if value != EMPTY)


def is_complete_solution(board):
    """True when every row, column and box holds each digit exactly once."""
    expected = set(DIGITS)

    if len(board) != SIZE or any(len(row) != SIZE for row in board):
        return False

    for row in board:
        if set(row) != expected:
            return False

    for col in range(SIZE):
        if {board[row][col] for row in range(SIZE)} != expected:
            return False

    for box_row in range(0, SIZE, BOX_SIZE):
        for box_col in range(0, SIZE, BOX_SIZE):
            box = {
                board[r][c]
                for r in range(box_row, box_row + BOX_SIZE)
                for c in range(box_col, box_col + BOX_SIZE)
            }
            if box != expected:
                return False

    return True


def format_board(board):
    return "\n".join(
        " ".join("." if value == EMPTY else str(value) for value in row)
        for row in board
    )


def parse_board(text):
    tokens = text.split()
    if len(tokens) != SIZE * SIZE:
        raise ValueError(f"Expected {SIZE * SIZE} cells, got {len(tokens)}")

    values = []
    for token in tokens:
        if token == ".":
            values.append(EMPTY)
        elif len(token) == 1 and token.isdigit() and token != "0":
            values.append(int(token))
        else:
            raise ValueError(f"Invalid cell: {token!r}")

    return [values[i:i + SIZE] for i in range(0, SIZE * SIZE, SIZE)]
