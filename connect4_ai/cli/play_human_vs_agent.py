"""CLI for playing against the adaptive engine."""

import asyncio
import sys
from typing import Literal, Optional

import tyro

import connect4_ai.agents  # noqa: F401 - registers the default agents
from connect4_ai.agents.connect4 import DifficultyTier, PlayStyle, SkillRating
from connect4_ai.config import EngineConfig, load_config
from connect4_ai.games.connect4 import IllegalMoveError, Side, available_columns
from connect4_ai.registry import make_agent
from connect4_ai.utils import Match


def _read_column(match: Match) -> Optional[int]:
    legal_actions = available_columns(match.board)
    print(f"Your turn! Legal columns: {legal_actions} (q to forfeit)")
    while True:
        raw = input("Enter column (0-6): ").strip().lower()
        if raw == "q":
            return None
        try:
            action = int(raw)
        except ValueError:
            print("Please enter a valid number!")
            continue
        if action in legal_actions:
            return action
        print(f"Invalid action! Legal columns: {legal_actions}")


async def _play(match: Match, hints: bool) -> None:
    while not match.is_over:
        print(match.board.render())

        if match.to_move is Side.PLAYER:
            if hints:
                hint = match.engine.coaching_hint(match.board)
                if hint is not None:
                    print(f"Hint: {hint.reason}")
            column = _read_column(match)
            if column is None:
                match.forfeit(Side.PLAYER)
                break
            try:
                match.human_turn(column)
            except IllegalMoveError as exc:
                print(f"Illegal move: {exc}")
        else:
            print("Agent is thinking...")
            column = await match.ai_turn()
            if column is not None:
                step = match.engine.last_decision.step if match.engine.last_decision else "?"
                print(f"Agent chose column: {column} ({step})")
        print()


def play_human_vs_agent(
    tier: Literal["noob", "average", "good", "professional"] = "average",
    rating: Optional[float] = None,
    style: Optional[Literal["aggressive", "defensive", "balanced", "opportunistic"]] = None,
    human_first: bool = True,
    hints: bool = False,
    think_scale: float = 1.0,
    config_path: Optional[str] = None,
    seed: Optional[int] = None,
):
    """
    Play a game against the adaptive engine.

    Args:
        tier: Practice-mode tier (ignored when ``rating`` is given)
        rating: Ranked-mode skill rating; picks the difficulty from the rating bands
        style: Fixed play style for the engine (random if omitted)
        human_first: Whether human plays first
        hints: Print a coaching hint before every human move
        think_scale: Multiplier for the simulated thinking time (0 disables it)
        config_path: Optional YAML config overriding the defaults
        seed: Random seed
    """
    config = load_config(config_path) if config_path else EngineConfig()
    config.thinking.scale = think_scale

    source = SkillRating(rating) if rating is not None else DifficultyTier[tier.upper()]
    try:
        engine = make_agent(
            "adaptive",
            difficulty_source=source,
            config=config,
            seed=seed,
            style=PlayStyle(style) if style is not None else None,
        )
    except ValueError as exc:
        print(f"Error: {exc}")
        sys.exit(1)

    print("=" * 50)
    print("Connect Four - Human vs Agent")
    print("=" * 50)
    print(f"Difficulty: {engine.difficulty} ({engine.style.value})")
    print(f"Human plays: {'first (X)' if human_first else 'second (O)'}")
    print("=" * 50)
    print()

    match = Match(engine, human_first=human_first)
    asyncio.run(_play(match, hints))

    print(match.board.render())
    if match.forfeited_by is Side.PLAYER:
        print("You forfeited. Agent wins!")
    elif match.winner is Side.PLAYER:
        print("You win!")
    elif match.winner is Side.AI:
        print("Agent wins!")
    else:
        print("It's a draw!")


if __name__ == "__main__":
    tyro.cli(play_human_vs_agent)
