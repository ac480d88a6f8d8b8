"""CLI for playing CPU vs CPU series."""

import logging
import sys
from typing import Optional

import tyro

from reversi.agents import CornerBiasedAgent
from reversi.board import BoardState, Cell, Coord
from reversi.cli.play import render_board
from reversi.config import MatchConfig, load_config
from reversi.utils import GameRecord, MetricsLogger, play_match


def play_agent_vs_agent(
    num_games: Optional[int] = None,
    size: Optional[int] = None,
    seed: Optional[int] = None,
    fixed_colors: bool = False,
    render: bool = False,
    log_dir: Optional[str] = None,
    config: Optional[str] = None,
    verbose: bool = False,
):
    """
    Play a series of games between two corner-biased CPU players.

    Args:
        num_games: Number of games to play (default 10)
        size: Board side length, an even number >= 4 (default 8)
        seed: Random seed; agent 1 uses ``seed``, agent 2 ``seed + 1``
        fixed_colors: Keep agent 1 on Dark instead of swapping colors every game
        render: Print the board after every move
        log_dir: Write per-game metrics as CSV into this directory
        config: Optional YAML file with a 'match' section; other flags override it
        verbose: Enable debug logging
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        cfg = load_config(config).match if config is not None else MatchConfig()
        if num_games is not None:
            cfg.num_games = num_games
        if size is not None:
            cfg.size = size
        if seed is not None:
            cfg.seed = seed
        if log_dir is not None:
            cfg.log_dir = log_dir
        cfg.alternate_colors = cfg.alternate_colors and not fixed_colors
        cfg.render = cfg.render or render
        cfg.validate()
    except (OSError, ValueError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    base_seed = cfg.seed if cfg.seed is not None else 42
    agent1 = CornerBiasedAgent(seed=base_seed)
    agent2 = CornerBiasedAgent(seed=base_seed + 1)

    print("=" * 50)
    print("Reversi - Agent vs Agent")
    print("=" * 50)
    print(f"Board: {cfg.size} x {cfg.size}")
    print(f"Games: {cfg.num_games}")
    print(f"Colors: {'alternating' if cfg.alternate_colors else 'agent 1 always dark'}")
    print("=" * 50)
    print()

    metrics = MetricsLogger(log_dir=cfg.log_dir, prefix="match") if cfg.log_dir else None

    def on_move(board_state: BoardState, mover: Cell, move: Coord) -> None:
        print(f"{BoardState.label_of(mover)} plays {move[0]} {move[1]}")
        print(render_board(board_state))

    def on_game_end(game_idx: int, record: GameRecord, agent1_is_dark: bool) -> None:
        if record.winner == Cell.EMPTY:
            outcome = "Draw!"
        elif (record.winner == Cell.DARK) == agent1_is_dark:
            outcome = "Agent 1 wins!"
        else:
            outcome = "Agent 2 wins!"
        dark_label, light_label = BoardState.color_labels()
        print(
            f"Game {game_idx + 1}/{cfg.num_games}: "
            f"{dark_label} {record.dark_count}, {light_label} {record.light_count} "
            f"in {record.plies} moves. {outcome}"
        )
        if metrics is not None:
            metrics.log_dict(
                {
                    "agent1_dark": int(agent1_is_dark),
                    "dark_count": record.dark_count,
                    "light_count": record.light_count,
                    "winner": int(record.winner),
                    "plies": record.plies,
                },
                step=game_idx,
            )

    try:
        agent1_wins, draws, agent2_wins = play_match(
            agent1,
            agent2,
            num_games=cfg.num_games,
            half_size=cfg.size // 2,
            alternate_colors=cfg.alternate_colors,
            on_move=on_move if cfg.render else None,
            on_game_end=on_game_end,
        )
    finally:
        if metrics is not None:
            metrics.close()

    n = cfg.num_games
    print()
    print("=" * 50)
    print("Results Summary")
    print("=" * 50)
    print(f"Agent 1 wins: {agent1_wins} ({agent1_wins/n*100:.1f}%)")
    print(f"Agent 2 wins: {agent2_wins} ({agent2_wins/n*100:.1f}%)")
    print(f"Draws: {draws} ({draws/n*100:.1f}%)")
    if metrics is not None:
        print(f"Metrics written to {metrics.csv_path}")
    print("=" * 50)


def main() -> None:
    tyro.cli(play_agent_vs_agent)


if __name__ == "__main__":
    main()
