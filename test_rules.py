"""
Test script for move legality and move application.
"""
import random

from othello.game.board import ALL_COORDS, Board, Coord, Player, starting_board
from othello.game.rules import apply_move, flipped_cells, has_legal_move, is_legal, legal_moves


def _random_positions(num_games=5, seed=0):
    """Yield (board, player) pairs reached by random play."""
    rng = random.Random(seed)
    for _ in range(num_games):
        board, player = starting_board(), Player.BLACK
        while True:
            moves = legal_moves(board, player)
            if not moves:
                player = player.opponent
                moves = legal_moves(board, player)
                if not moves:
                    break
            yield board, player
            board = apply_move(board, rng.choice(moves), player)
            player = player.opponent


def test_valid_moves():
    """Test valid move generation from the opening."""
    moves = legal_moves(starting_board(), Player.BLACK)

    expected_moves = [Coord(4, 2), Coord(5, 3), Coord(2, 4), Coord(3, 5)]
    assert moves == expected_moves, f"Expected valid moves {expected_moves}, got {moves}"
    assert len(legal_moves(starting_board(), Player.WHITE)) == 4

    print("Valid moves test passed!")


def test_make_move():
    """Black plays below the white piece at (3, 4) and captures it."""
    board = starting_board()

    assert flipped_cells(board, (3, 5), Player.BLACK) == [Coord(3, 4)]
    after = apply_move(board, (3, 5), Player.BLACK)

    assert after.cell_at((3, 5)) == Player.BLACK, "Move should place black piece"
    assert after.cell_at((3, 4)) == Player.BLACK, "Should capture white piece"
    assert after.score() == (4, 1)
    assert board == starting_board(), "Input board must not be mutated"

    print("Make move test passed!")


def test_occupied_cell_is_never_legal():
    board = starting_board()
    assert not is_legal(board, (3, 3), Player.BLACK)
    assert not is_legal(board, (4, 3), Player.BLACK)


def test_legal_moves_agree_with_is_legal():
    for board, player in _random_positions():
        moves = legal_moves(board, player)
        assert len(set(moves)) == len(moves)
        assert all(is_legal(board, move, player) for move in moves)
        assert set(moves) == {c for c in ALL_COORDS if is_legal(board, c, player)}
        assert has_legal_move(board, player) == bool(moves)


def test_applied_move_is_no_longer_legal_and_adds_one_piece():
    for board, player in _random_positions(num_games=3, seed=1):
        before = sum(board.score())
        for move in legal_moves(board, player):
            after = apply_move(board, move, player)
            assert not is_legal(after, move, player)
            assert sum(after.score()) == before + 1
            # Flips change ownership only, and only towards the mover
            assert after.count(player) == board.count(player) + 1 + len(flipped_cells(board, move, player))


def test_no_wrap_around_east_edge():
    """Column 7 scanning east must never reach column 0 of the next row."""
    rows = ["........"] * 8
    rows[3] = "WB......"
    board = Board.from_rows(rows)

    # With flat offsets, (7, 2) + 1 would be (0, 3)
    assert not is_legal(board, (7, 2), Player.BLACK)
    assert legal_moves(board, Player.BLACK) == []
    assert legal_moves(board, Player.WHITE) == [Coord(2, 3)]


def test_no_wrap_around_west_edge():
    rows = ["........"] * 8
    rows[3] = "......BW"
    board = Board.from_rows(rows)

    # With flat offsets, (0, 4) - 1 would be (7, 3)
    assert not is_legal(board, (0, 4), Player.BLACK)
    assert legal_moves(board, Player.BLACK) == []


def test_no_wrap_around_top_edge():
    rows = ["........"] * 8
    rows[6] = "...B...."
    rows[7] = "...W...."
    board = Board.from_rows(rows)

    # With flat offsets, (3, 0) - 8 would index (3, 7)
    assert not is_legal(board, (3, 0), Player.BLACK)
    assert legal_moves(board, Player.BLACK) == []


def test_capture_along_edge():
    rows = ["BW......"] + ["........"] * 7
    board = Board.from_rows(rows)

    assert legal_moves(board, Player.BLACK) == [Coord(2, 0)]
    after = apply_move(board, (2, 0), Player.BLACK)
    assert after.score() == (3, 0)


def test_run_ending_on_empty_cell_is_not_flipped():
    rows = ["........"] * 8
    rows[2] = "..BWW..."
    rows[3] = "..WB...."
    board = Board.from_rows(rows)

    # East of (5, 2) is empty; west is W,W,B so that run is captured
    after = apply_move(board, (5, 2), Player.BLACK)
    assert after.cell_at((3, 2)) == Player.BLACK
    assert after.cell_at((4, 2)) == Player.BLACK
    # (4, 3) is empty so the south-west ray captures nothing
    assert after.cell_at((2, 3)) == Player.WHITE


def test_multiple_directions_flip():
    rows = [
        "B.B.....",
        ".WW.....",
        "BW......",
        "........",
        "........",
        "........",
        "........",
        "........",
    ]
    board = Board.from_rows(rows)
    after = apply_move(board, (2, 2), Player.BLACK)

    assert set(flipped_cells(board, (2, 2), Player.BLACK)) == {Coord(1, 1), Coord(2, 1), Coord(1, 2)}
    assert after.count(Player.WHITE) == 0


if __name__ == "__main__":
    print("Running Othello rules tests...\n")

    test_valid_moves()
    test_make_move()
    test_legal_moves_agree_with_is_legal()
    test_no_wrap_around_east_edge()

    print("\nAll tests passed successfully!")
