"""Utilities for driving games and matches between agents."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple, Union

from ..agents.base_agent import BaseAgent
from ..board import BoardState, Cell, Coord

logger = logging.getLogger(__name__)

MoveCallback = Callable[[BoardState, Cell, Coord], None]


@dataclass
class GameRecord:
    """Outcome of a finished game."""

    dark_count: int
    light_count: int
    winner: Cell
    plies: int
    moves: List[Coord] = field(default_factory=list)


def play_turn(board_state: BoardState, agent: BaseAgent) -> Tuple[Coord, bool]:
    """
    Let ``agent`` move for the color to play.

    Args:
        board_state: Game in progress; mutated in place
        agent: Move source for the current color

    Returns:
        Tuple of (chosen move, whether play can continue).
    """
    move = agent.select_action(board_state)
    if move not in board_state.legal_moves():
        raise ValueError(f"Agent returned illegal move {move} for {board_state.current_turn().name}")
    can_continue = board_state.put(*move)
    return move, can_continue


def play_game(
    board_state: BoardState,
    dark_agent: BaseAgent,
    light_agent: BaseAgent,
    on_move: Optional[MoveCallback] = None,
) -> GameRecord:
    """
    Play ``board_state`` to the end.

    Args:
        board_state: Fresh or in-progress game; mutated in place
        dark_agent: Agent playing Dark
        light_agent: Agent playing Light
        on_move: Optional callback invoked as ``on_move(board_state, mover, move)``

    Returns:
        GameRecord with final counts, winner and move list.
    """
    moves: List[Coord] = []
    can_continue = not board_state.is_over
    while can_continue:
        mover = board_state.current_turn()
        agent = dark_agent if mover == Cell.DARK else light_agent
        move, can_continue = play_turn(board_state, agent)
        moves.append(move)
        if on_move is not None:
            on_move(board_state, mover, move)

    (_, dark), (_, light) = board_state.final_counts()
    winner = board_state.winner()
    logger.debug("Game finished after %d plies: dark=%d light=%d", len(moves), dark, light)
    return GameRecord(
        dark_count=dark,
        light_count=light,
        winner=winner,
        plies=len(moves),
        moves=moves,
    )


def play_match(
    agent1: BaseAgent,
    agent2: BaseAgent,
    num_games: int = 10,
    half_size: int = 4,
    alternate_colors: bool = True,
    start_reversed: bool = False,
    collect_records: bool = False,
    on_move: Optional[MoveCallback] = None,
    on_game_end: Optional[Callable[[int, GameRecord, bool], None]] = None,
) -> Union[Tuple[int, int, int], Tuple[int, int, int, List[GameRecord]]]:
    """
    Play a series of games between two agents.

    Args:
        agent1: First agent
        agent2: Second agent
        num_games: Number of games to play
        half_size: Half of the board side
        alternate_colors: If True, agents swap colors every game.
                          If False, agent1 always plays Dark (moves first).
        start_reversed: Swap the colors of the opening disks
        collect_records: If True, also return the GameRecord of every game
        on_move: Optional per-move callback forwarded to play_game
        on_game_end: Optional callback ``(game_idx, record, agent1_is_dark)``

    Returns:
        Tuple of (agent1_wins, draws, agent2_wins). If ``collect_records`` is True,
        also returns the list of GameRecords.
    """
    agent1_wins = 0
    draws = 0
    agent2_wins = 0
    records: List[GameRecord] = []

    for game_idx in range(num_games):
        agent1_is_dark = not (alternate_colors and game_idx % 2 == 1)
        dark_agent, light_agent = (agent1, agent2) if agent1_is_dark else (agent2, agent1)

        record = play_game(
            BoardState(half_size, start_reversed),
            dark_agent,
            light_agent,
            on_move=on_move,
        )

        if record.winner == Cell.EMPTY:
            draws += 1
        elif (record.winner == Cell.DARK) == agent1_is_dark:
            agent1_wins += 1
        else:
            agent2_wins += 1

        if collect_records:
            records.append(record)
        if on_game_end is not None:
            on_game_end(game_idx, record, agent1_is_dark)

    if collect_records:
        return agent1_wins, draws, agent2_wins, records
    return agent1_wins, draws, agent2_wins
