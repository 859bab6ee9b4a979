from tetris_board import new_board


def board_with(cells=(), full_rows=(), hole=None, tag="Z"):
    """Empty board with `cells` set and `full_rows` filled except column `hole`."""
    board = new_board()
    for y in full_rows:
        board[y] = [None if x == hole else tag for x in range(len(board[y]))]
    for x, y in cells:
        board[y][x] = tag
    return board
