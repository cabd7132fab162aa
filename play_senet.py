#!/usr/bin/env python3
"""
Minimal CLI for simulating Senet games.

This script demonstrates the rules engine by running a self-play game
between two simple agents. Each agent is shown only the public board and
its own invisible pieces.
"""

import argparse
import logging
from typing import Dict, Optional

from agents import Agent, GreedyAgent, RandomAgent
from senet.board import render_board
from senet.config import GameConfig
from senet.exceptions import MoveError
from senet.session import GameSession
from senet.settings import EngineSettings, configure_logging, get_engine_settings

logger = logging.getLogger(__name__)


def print_board(session: GameSession, viewer: Optional[str] = None) -> None:
    """Print the board as ``viewer`` sees it (public view if None)."""
    hidden = session.view(viewer)[1].positions if viewer is not None else None
    print(render_board(session.public.occupancy, hidden=hidden))


def print_game_summary(session: GameSession) -> None:
    """Print final game summary."""
    print("\n" + "=" * 60)
    print("GAME STOPPED")
    print("=" * 60)
    print_board(session)
    for player in session.players:
        _, private = session.view(player)
        hidden = bin(private.positions).count("1")
        print(f"  {player}: {hidden} invisible piece(s)")
    print(f"\nTotal Moves: {session.move_count}")


def build_agents(agent_type: str, players, seed: Optional[int]) -> Dict[str, Agent]:
    if agent_type == "random":
        return {p: RandomAgent(p, seed=None if seed is None else seed + i) for i, p in enumerate(players)}
    return {p: GreedyAgent(p) for p in players}


def simulate_game(
    agent_type: str = "greedy",
    seed: Optional[int] = None,
    verbose: bool = True,
    settings: Optional[EngineSettings] = None,
    max_moves: Optional[int] = None,
) -> GameSession:
    """
    Simulate a complete Senet game.

    Args:
        agent_type: Type of AI ('random' or 'greedy')
        seed: Random seed for reproducibility
        verbose: Whether to print detailed output
        settings: Engine settings (defaults to environment)
        max_moves: Move cap overriding the settings
    """
    settings = settings or get_engine_settings()
    config = GameConfig(
        seed=seed,
        max_moves=max_moves or settings.max_moves or GameConfig.max_moves,
        record_events=settings.record_events,
    )
    session = GameSession("white", "black", config)
    agents = build_agents(agent_type, session.players, seed)

    if verbose:
        print(f"Starting game {session.players[0]} vs {session.players[1]} using {agent_type} agents")
        print(f"Seed: {seed}")
        print_board(session)

    while not session.is_over:
        holder = session.holder
        dice = session.throw()
        public, private = session.view(holder)
        legal = session.legal_moves(holder, dice)
        choice = agents[holder].choose_move(public, private, legal)

        if choice is None:
            session.pass_turn(holder, dice)
            if verbose:
                print(f"{holder} throws {dice}: no move")
            continue

        try:
            session.play(holder, choice.origin, dice)
        except MoveError as exc:
            # Agents only pick from legal moves; treat this as a bug and stop.
            logger.error(f"Agent {holder} chose an illegal move: {exc}")
            raise
        if verbose:
            kind = "exchange" if choice.is_exchange else "move"
            print(f"{holder} throws {dice}: {kind} {choice.origin} -> {choice.destination}")

    if verbose:
        print_game_summary(session)

    return session


def main():
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(description="Simulate a Senet game")
    parser.add_argument(
        "--agent",
        type=str,
        default="greedy",
        choices=["random", "greedy"],
        help="AI agent type",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--quiet", action="store_true", help="Reduce output verbosity")
    parser.add_argument(
        "--max-moves",
        type=int,
        default=None,
        help="Stop after this many moves (default: SENET_MAX_MOVES)",
    )
    parser.add_argument("--log-level", type=str, default=None, help="Override SENET_LOG_LEVEL")

    args = parser.parse_args()

    settings = get_engine_settings()
    if args.log_level:
        settings = EngineSettings(log_level=args.log_level)
    configure_logging(settings)

    simulate_game(
        agent_type=args.agent,
        seed=args.seed,
        verbose=not args.quiet,
        settings=settings,
        max_moves=args.max_moves,
    )


if __name__ == "__main__":
    main()
