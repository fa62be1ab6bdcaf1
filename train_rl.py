"""
Training script for the Q-learning Hangman agent.

This script:
1. Loads the word list
2. Plays games on random words, letting the agent learn from every move
3. Prints win/loss progress every N games
4. Saves the value table, configuration and a training plot to results/
"""

import argparse
import json
import os
import sys
from typing import List, Optional

import matplotlib.pyplot as plt
import numpy as np
from tqdm import tqdm

import config
from dataset import CorpusExhausted, WordCorpus
from hangman_env import HangmanGame, Status
from rl_agent import QTableAgent, next_action
from utils import moving_average


def play_episode(agent: QTableAgent, game: HangmanGame, rng: np.random.Generator, learn: bool = True) -> Status:
    """
    Play a game until it is won or lost.

    Args:
        agent: Chooses the letters
        game: A fresh game
        rng: Random generator for tie-breaking
        learn: Whether the agent updates its value table

    Returns:
        The final game status
    """
    game.log("Game created")

    while game.is_complete() == Status.ACTIVE:
        action = next_action(agent, game, rng)

        if learn:
            agent.learn(action, game)
        else:
            action.action.apply(game)

        # Reward doesn't change state, so it can report how the move went.
        if game.reward(action) > 0.0:
            game.log("%s was correct", action.action)
        else:
            game.log("%s was incorrect", action.action)

    status = game.is_complete()
    if status == Status.WON:
        game.log("Victory!")
    else:
        game.log("Defeat!")

    return status


class TrainingStats:
    """
    Win/loss counters for a training run.
    """

    def __init__(self):
        self.games = 0
        self.wins = 0
        self.last_wins = 0
        self.accuracy: List[float] = []

    @property
    def losses(self) -> int:
        return self.games - self.wins

    def record(self, status: Status):
        self.games += 1
        if status == Status.WON:
            self.wins += 1

    def progress(self, progress_at: int) -> Optional[str]:
        """
        Progress line for the last `progress_at` games, or None between reports.
        """
        if self.games == 0 or self.games % progress_at != 0:
            return None

        accuracy = (self.wins - self.last_wins) / progress_at * 100.0
        self.last_wins = self.wins
        self.accuracy.append(accuracy)
        return f"{self.games} games played: {self.wins} WINS {self.losses} LOSSES {accuracy:.0f} ACCURACY"

    def summary(self) -> str:
        accuracy = self.wins / self.games * 100.0 if self.games else 0.0
        return (
            f"Agent performance: {self.games} games played, "
            f"{self.wins} WINS {self.losses} LOSSES {accuracy:.0f} ACCURACY"
        )


def train(
    corpus: WordCorpus,
    agent: QTableAgent,
    num_games: int = config.PLAY_FOR,
    progress_at: int = config.PROGRESS_AT,
    starting_lives: int = config.STARTING_LIVES,
    debug: bool = False,
    rng: Optional[np.random.Generator] = None,
) -> TrainingStats:
    """
    Train the agent on random words from the corpus.

    Args:
        corpus: Words to play
        agent: Agent to train
        num_games: Number of games to play
        progress_at: Print progress every N games
        starting_lives: Lives per game
        debug: Whether games print per-move logs
        rng: Random generator for word sampling and tie-breaking

    Returns:
        Statistics for the run
    """
    if rng is None:
        rng = np.random.default_rng()

    stats = TrainingStats()

    for _ in tqdm(range(num_games), desc="Training", disable=debug):
        game = HangmanGame(corpus.sample(rng), starting_lives=starting_lives, debug=debug)
        stats.record(play_episode(agent, game, rng))

        line = stats.progress(progress_at)
        if line is not None:
            tqdm.write(line)

    return stats


def plot_training_results(stats: TrainingStats, progress_at: int, save_path: str = config.RESULTS_DIR):
    """
    Plot windowed accuracy over training.

    Args:
        stats: Statistics from train()
        progress_at: Games per accuracy window
        save_path: Directory to save the plot
    """
    print("\nGenerating training plot...")

    fig, ax = plt.subplots(figsize=(10, 5))

    games = np.arange(1, len(stats.accuracy) + 1) * progress_at
    ax.plot(games, stats.accuracy, alpha=0.5, label=f'Accuracy per {progress_at} games')

    window = 10
    moving_avg = moving_average(stats.accuracy, window)
    if len(moving_avg) > 0:
        ax.plot(games[window - 1:], moving_avg, linewidth=2, label=f'{window}-Window Moving Avg')

    ax.set_xlabel('Games')
    ax.set_ylabel('Accuracy (%)')
    ax.set_title('Win Rate over Training')
    ax.set_ylim([0, 100])
    ax.legend()
    ax.grid(True, alpha=0.3)

    plt.tight_layout()
    plot_path = os.path.join(save_path, config.PLOT_FILE)
    plt.savefig(plot_path, dpi=150)
    print(f"Training plot saved to {plot_path}")
    plt.close(fig)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Train a Q-learning agent to play Hangman")
    parser.add_argument("--wordlist", type=str, default=config.WORDLIST_PATH, help="Path to a wordlist")
    parser.add_argument("--debug", action="store_true", help="Print per-move game logs")
    parser.add_argument("--progress", type=int, default=config.PROGRESS_AT, help="Print progress messages every N games")
    parser.add_argument("--words", type=int, default=config.WORD_COUNT, help="Use N words from wordlist")
    parser.add_argument("--games", type=int, default=config.PLAY_FOR, help="Play N games")
    parser.add_argument("--learning-rate", type=float, default=config.LEARNING_RATE)
    parser.add_argument("--discount", type=float, default=config.DISCOUNT)
    parser.add_argument("--lives", type=int, default=config.STARTING_LIVES)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--results-dir", type=str, default=config.RESULTS_DIR)
    args = parser.parse_args(argv)

    if args.progress < 1:
        parser.error("--progress must be at least 1")

    return args


def main(argv=None):
    """Main training function."""
    args = parse_args(argv)

    try:
        corpus = WordCorpus.from_file(args.wordlist, args.words)
    except (FileNotFoundError, CorpusExhausted) as e:
        print(f"\n{e}")
        sys.exit(1)

    agent = QTableAgent(learning_rate=args.learning_rate, discount=args.discount)

    print("\n" + "=" * 60)
    print("Training Q-learning Agent")
    print("=" * 60)

    stats = train(
        corpus=corpus,
        agent=agent,
        num_games=args.games,
        progress_at=args.progress,
        starting_lives=args.lives,
        debug=args.debug,
        rng=np.random.default_rng(args.seed),
    )

    print(f"\n{stats.summary()}")

    os.makedirs(args.results_dir, exist_ok=True)
    agent.save(os.path.join(args.results_dir, config.Q_TABLE_FILE))
    plot_training_results(stats, args.progress, args.results_dir)

    run_config = {
        'wordlist': args.wordlist,
        'words': len(corpus),
        'games': args.games,
        'progress': args.progress,
        'learning_rate': args.learning_rate,
        'discount': args.discount,
        'lives': args.lives,
        'seed': args.seed,
        'states_learned': len(agent),
    }

    config_path = os.path.join(args.results_dir, config.CONFIG_FILE)
    with open(config_path, 'w') as f:
        json.dump(run_config, f, indent=4)

    print(f"Config saved to: {config_path}")


if __name__ == "__main__":
    main()
