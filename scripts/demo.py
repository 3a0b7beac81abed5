import sys
from pathlib import Path

ROOT = Path(__file__).parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from untangle import PuzzleParams, execute_move, generate_puzzle, new_game, solve_game


def main() -> None:
    seed = int(sys.argv[1]) if len(sys.argv) > 1 else 1
    puzzle = generate_puzzle(PuzzleParams(10), seed=seed)
    state = new_game(puzzle.params, puzzle.desc)

    print("Description:", puzzle.desc)
    print("Edges:", len(state.edges))
    print("Initial crossings:", len(state.crossing_pairs()))

    solved = execute_move(state, solve_game(state, puzzle.aux))
    print("Solved:", solved.completed)
    for i, point in enumerate(solved.points):
        print(f"  {i}: ({point.x}/{point.d}, {point.y}/{point.d})")

    state.release()
    solved.release()


if __name__ == "__main__":
    main()
