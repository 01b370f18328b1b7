import logging
from typing import List, Optional, Tuple
from gomoku_ai.board import Board
from gomoku_ai.eval import Evaluator
from gomoku_ai.pattern import detect_all_patterns
from gomoku_ai.search import ABSearcher
from gomoku_ai.types import Color, Outcome, Pattern

logging.basicConfig(level=logging.INFO, format='%(asctime)s %(name)s %(levelname)s: %(message)s')
logger = logging.getLogger(__name__)

COLOR_NAMES = {Color.BLACK: 'Black (X)', Color.WHITE: 'White (O)'}


def pos_to_notation(pos: Tuple[int, int]) -> str:
    """
    Convert a board position to the usual notation, columns A-P without I (e.g. 'H8').
    """
    col = chr(ord('A') + pos[1])
    if col >= 'I':
        col = chr(ord(col) + 1)
    return f"{col}{pos[0] + 1}"


def print_stats(board: Board, history: List[Tuple[int, int, Color]], evaluator: Evaluator):
    print(f"Moves: {len(history)}  Black: {board.stone_count(Color.BLACK)}  White: {board.stone_count(Color.WHITE)}")
    for color in (Color.BLACK, Color.WHITE):
        counts = detect_all_patterns(board, color)
        shapes = ', '.join(f"{p.value}={counts[p]}" for p in Pattern if counts[p])
        print(f"  {COLOR_NAMES[color]}: {shapes or 'no shapes'} (score {evaluator.pattern_score(counts)})")


def report_outcome(outcome: Outcome) -> bool:
    if outcome == Outcome.CONTINUE:
        return False
    if outcome == Outcome.DRAW:
        print("Game over: draw.")
    else:
        print(f"Game over: {COLOR_NAMES[outcome.winner]} wins!")
    return True


def ai_move(board: Board, searcher: ABSearcher, side: Color) -> Optional[Tuple[int, int]]:
    if board.is_blank():
        # Opening is the caller's decision, the engine has nothing to search around
        move = (board.size // 2, board.size // 2)
        print(f"AI opens at {pos_to_notation(move)} {move}")
        return move
    result = searcher.find_best_move(board, side)
    if result is None or result.move is None:
        logger.error("AI found no move to play")
        return None
    for entry in result.logs:
        print(f"  [{entry.timestamp}] {entry.message}")
    print(f"AI moves to {pos_to_notation(result.move)} {result.move}, score {result.score}")
    return result.move


def interactive():
    board = Board()
    searcher = ABSearcher()
    history: List[Tuple[int, int, Color]] = []
    side = Color.BLACK
    game_over = False

    print("Welcome to Gomoku! You are Black (X), AI is White (O).")
    print("Enter moves as 'row,col' (e.g., '7,7'). Commands: undo, new, stats, dump, quit.")

    while True:
        print(board)
        print()

        if side == Color.WHITE and not game_over:
            move = ai_move(board, searcher, side)
            if move is None:
                game_over = True
                continue
            board.set(move, side)
            history.append((move[0], move[1], side))
            game_over = report_outcome(searcher.check_winner(board))
            side = side.opposite()
            continue

        command = input("Your move (row,col): ").strip().lower()
        if command == 'quit':
            break
        if command == 'new':
            board, history, side, game_over = Board(), [], Color.BLACK, False
            continue
        if command == 'stats':
            print_stats(board, history, Evaluator(searcher.settings))
            continue
        if command == 'dump':
            # Raw snapshot in the 0/1/2 encoding accepted by Board.from_rows
            for row in board.to_rows():
                print(''.join(str(v) for v in row))
            continue
        if command == 'undo':
            # Take back the AI reply and our own move
            for _ in range(2):
                if history:
                    row, col, _color = history.pop()
                    board.set((row, col), Color.EMPTY)
            side, game_over = Color.BLACK, False
            continue
        if game_over:
            print("Game is over. Type 'new', 'undo' or 'quit'.")
            continue
        try:
            row, col = map(int, command.split(','))
            if not board.is_empty((row, col)):
                print("Invalid move: position occupied.")
                continue
        except (ValueError, IndexError):
            print("Invalid input. Use 'row,col' format with values 0-14.")
            continue
        board.set((row, col), side)
        history.append((row, col, side))
        game_over = report_outcome(searcher.check_winner(board))
        side = side.opposite()


def test_position(moves: List[Tuple[int, int]], depth: int = 2):
    board = Board()
    side = Color.BLACK
    for pos in moves:
        board.set(pos, side)
        side = side.opposite()

    print(board)
    print(f"Side to move: {COLOR_NAMES[side]}")

    searcher = ABSearcher({'search_depth': depth})
    result = searcher.find_best_move(board, side)
    if result is None:
        print("AI suggests: None")
        return
    for entry in result.logs:
        print(f"  [{entry.timestamp}] {entry.message}")
    logger.info(f"Best Move: {result.move}, nodes {result.search_nodes}, prunings {result.pruning_count}")
    print(f"AI suggests: {pos_to_notation(result.move)} {result.move} with score {result.score}")


if __name__ == "__main__":
    print("Choose mode: 1) Interactive, 2) Test Position")
    choice = input("Enter 1 or 2: ").strip()

    if choice == '1':
        interactive()
    elif choice == '2':
        test_moves = [(7, 7), (7, 6), (6, 6), (5, 5), (6, 8), (6, 5), (6, 7), (5, 7), (14, 14)]
        test_position(test_moves)
    else:
        print("Invalid choice. Exiting.")
