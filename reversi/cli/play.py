"""CLI for playing Reversi in the terminal."""

import logging
import sys
import time
from typing import Literal, Optional, Set, Union

import tyro

from reversi.agents import CornerBiasedAgent
from reversi.board import BoardState, Cell, Coord
from reversi.config import GameConfig, load_config
from reversi.utils import play_turn

HINT = "hint"
QUIT = "quit"
HINT_SYMBOL = "+"

MODE_TITLES = {
    "pvp": "One player, both colors",
    "cpu": "Human vs CPU",
    "watch": "CPU vs CPU (watch)",
}


def render_board(board_state: BoardState, hints: bool = False) -> str:
    """Text picture of the board with row/column indices; legal cells show '+' when ``hints``."""
    n = board_state.board_size()
    grid = board_state.render_grid()
    if hints:
        capture_map = board_state.capture_map()
        for r in range(n):
            for c in range(n):
                if capture_map[r, c] > 0:
                    grid[r][c] = HINT_SYMBOL

    rule = "=" * (3 * n + 3)
    lines = [rule, "   " + "".join(f"{c:>3}" for c in range(n)), rule]
    for r in range(n):
        lines.append(f"{r:>2} " + "".join(f"{sym:>3}" for sym in grid[r]))
    lines.append(rule)
    (dark_label, dark), (light_label, light) = board_state.count_pieces()
    lines.append(f"{dark_label}: {dark}, {light_label}: {light}")
    return "\n".join(lines)


def show_result(board_state: BoardState) -> str:
    """Result line from the current disk counts."""
    (c1, s1), (c2, s2) = board_state.count_pieces()
    if s1 > s2:
        verdict = f"{c1} wins!"
    elif s1 < s2:
        verdict = f"{c2} wins!"
    else:
        verdict = "Draw!"
    return f"{c1} {s1}, {c2} {s2}: {verdict}"


def parse_coord(text: str) -> Optional[Coord]:
    """Parse 'row col' or 'row,col' (zero-based). Returns None when malformed."""
    parts = [p for p in text.replace(",", " ").split() if p]
    if len(parts) != 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


def confirm_quit() -> bool:
    answer = input("Really end the game and see the result? [y/N]: ").strip().lower()
    return answer in {"y", "yes"}


def prompt_human_move(board_state: BoardState) -> Union[Coord, str]:
    """
    Read a move for the player to move.

    Returns:
        A legal (row, col), or HINT / QUIT for the corresponding commands.
    """
    n = board_state.board_size()
    label = board_state.current_turn_label()
    while True:
        text = input(f"{label} to move. Enter 'row col', 'h' for hints, 'q' to quit: ").strip().lower()
        if text in {"h", "hint", "help"}:
            return HINT
        if text in {"q", "quit", "exit"}:
            if confirm_quit():
                return QUIT
            continue

        coord = parse_coord(text)
        if coord is None:
            print(f"Please enter two numbers between 0 and {n - 1}, e.g. '2 3'.")
            continue
        row, col = coord
        if not (0 <= row < n and 0 <= col < n):
            print(f"Out of range! Rows and columns go from 0 to {n - 1}.")
            continue
        if board_state.capture_map()[row, col] == 0:
            print("Cannot place a disk there.")
            continue
        return coord


def human_colors(cfg: GameConfig) -> Set[Cell]:
    if cfg.mode == "pvp":
        return {Cell.DARK, Cell.LIGHT}
    if cfg.mode == "cpu":
        return {Cell.DARK if cfg.human_color == "dark" else Cell.LIGHT}
    return set()


def run_game(cfg: GameConfig) -> BoardState:
    """
    Run one interactive game.

    Args:
        cfg: Validated game configuration

    Returns:
        The final BoardState (finished, or abandoned with 'q').
    """
    board_state = BoardState(cfg.half_size, cfg.start_reversed)
    agent = CornerBiasedAgent(seed=cfg.seed)
    humans = human_colors(cfg)
    show_hints_once = False

    while True:
        print()
        print(render_board(board_state, hints=cfg.hints or show_hints_once))
        show_hints_once = False
        print(f"{board_state.which_turn()}'s turn.")

        if board_state.current_turn() not in humans:
            if cfg.cpu_delay > 0:
                time.sleep(cfg.cpu_delay)
            move, can_continue = play_turn(board_state, agent)
            print(f"CPU plays {move[0]} {move[1]}")
            if not can_continue:
                break
            continue

        choice = prompt_human_move(board_state)
        if choice == HINT:
            show_hints_once = True
            continue
        if choice == QUIT:
            break
        if not board_state.put(*choice):
            break

    print()
    print(render_board(board_state))
    print(show_result(board_state))
    return board_state


def play(
    size: Optional[int] = None,
    mode: Optional[Literal["pvp", "cpu", "watch"]] = None,
    human_color: Optional[Literal["dark", "light"]] = None,
    start_reversed: bool = False,
    seed: Optional[int] = None,
    cpu_delay: Optional[float] = None,
    hints: bool = False,
    config: Optional[str] = None,
    verbose: bool = False,
):
    """
    Play Reversi in the terminal.

    Args:
        size: Board side length, an even number >= 4 (default 8)
        mode: 'pvp' (one player, both colors), 'cpu' (human vs CPU) or 'watch' (CPU vs CPU)
        human_color: Color of the human in 'cpu' mode; dark moves first
        start_reversed: Swap the colors of the four opening disks
        seed: Random seed for the CPU player
        cpu_delay: Pause in seconds before each CPU move
        hints: Always mark legal cells with '+'
        config: Optional YAML file with a 'game' section; other flags override it
        verbose: Enable debug logging
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        cfg = load_config(config).game if config is not None else GameConfig()
        if size is not None:
            cfg.size = size
        if mode is not None:
            cfg.mode = mode
        if human_color is not None:
            cfg.human_color = human_color
        if seed is not None:
            cfg.seed = seed
        if cpu_delay is not None:
            cfg.cpu_delay = cpu_delay
        cfg.start_reversed = cfg.start_reversed or start_reversed
        cfg.hints = cfg.hints or hints
        cfg.validate()
    except (OSError, ValueError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    print("=" * 50)
    print("Reversi")
    print("=" * 50)
    print(f"Board: {cfg.size} x {cfg.size}")
    print(f"Mode: {MODE_TITLES[cfg.mode]}")
    if cfg.mode == "cpu":
        you = BoardState.black_piece() if cfg.human_color == "dark" else BoardState.white_piece()
        print(f"You play: {you} ({BoardState.black_piece()} moves first)")
    print("=" * 50)

    try:
        run_game(cfg)
    except (KeyboardInterrupt, EOFError):
        print("\nInterrupted.")


def main() -> None:
    tyro.cli(play)


if __name__ == "__main__":
    main()
