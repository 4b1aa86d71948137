"""
Othello Rules - Legality, flipping and turn passing on a 6x6 board.

All functions are pure. apply_move and pass_turn return the state they
were given when the request does not apply.
"""

from __future__ import annotations

from .state import DIRECTIONS, SIZE, Board, Disc, OthelloState


def on_board(row: int, col: int) -> bool:
    return 0 <= row < SIZE and 0 <= col < SIZE


def _captures_in_direction(
    board: Board,
    row: int,
    col: int,
    side: Disc,
    d_row: int,
    d_col: int,
) -> list[tuple[int, int]]:
    """Opposing discs bracketed from (row, col) along one direction."""
    run: list[tuple[int, int]] = []
    r, c = row + d_row, col + d_col
    while on_board(r, c) and board[r][c] is side.other:
        run.append((r, c))
        r += d_row
        c += d_col
    if run and on_board(r, c) and board[r][c] is side:
        return run
    return []


def compute_flips(board: Board, row: int, col: int, side: Disc) -> list[tuple[int, int]]:
    """
    Every opposing disc captured by placing `side` on (row, col).

    Only meaningful for an empty, legal square.
    """
    flips: list[tuple[int, int]] = []
    for d_row, d_col in DIRECTIONS:
        flips.extend(_captures_in_direction(board, row, col, side, d_row, d_col))
    return flips


def is_legal_move(board: Board, row: int, col: int, side: Disc) -> bool:
    if not on_board(row, col) or board[row][col] is not None:
        return False
    return any(
        _captures_in_direction(board, row, col, side, d_row, d_col)
        for d_row, d_col in DIRECTIONS
    )


def find_legal_moves(board: Board, side: Disc) -> list[tuple[int, int]]:
    """Legal squares for `side`, in row-major order."""
    return [
        (row, col)
        for row in range(SIZE)
        for col in range(SIZE)
        if is_legal_move(board, row, col, side)
    ]


def place_disc(board: Board, row: int, col: int, side: Disc) -> Board:
    """Board after `side` plays (row, col) and its captures flip."""
    rows = [list(r) for r in board]
    rows[row][col] = side
    for r, c in compute_flips(board, row, col, side):
        rows[r][c] = side
    return tuple(tuple(r) for r in rows)


def _next_turn(board: Board, mover: Disc) -> dict:
    """Who moves next after `mover` has played on `board`."""
    if find_legal_moves(board, mover.other):
        return {"current_player": mover.other, "skip_turn": False, "game_over": False}
    if find_legal_moves(board, mover):
        return {"current_player": mover, "skip_turn": True, "game_over": False}
    return {"current_player": mover.other, "skip_turn": False, "game_over": True}


def apply_move(state: OthelloState, row: int, col: int) -> OthelloState:
    """
    Play (row, col) for the side to move.

    No-op when the game is over or the square is not a legal move.
    """
    if state.game_over:
        return state
    side = state.current_player
    if not is_legal_move(state.board, row, col, side):
        return state

    board = place_disc(state.board, row, col, side)
    return state._copy_with(
        board=board,
        last_move=(row, col),
        **_next_turn(board, side),
    )


def pass_turn(state: OthelloState) -> OthelloState:
    """
    Force-pass a side to move that has no legal move.

    Ends the game when neither side can move. No-op if the side to move
    still has a legal move.
    """
    if state.game_over:
        return state
    side = state.current_player
    if find_legal_moves(state.board, side):
        return state
    if find_legal_moves(state.board, side.other):
        return state._copy_with(current_player=side.other, skip_turn=True)
    return state._copy_with(game_over=True, skip_turn=False)
