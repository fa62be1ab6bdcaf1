"""
Evaluation script for the Hangman agent.

Plays games greedily with a trained value table, without learning, and reports:
- Success Rate
- Total and average wrong guesses
- Average number of moves
"""

import argparse
import json
import os
import sys

import numpy as np
from tqdm import tqdm

import config
from dataset import CorpusExhausted, WordCorpus
from hangman_env import HangmanGame, Status
from rl_agent import QTableAgent
from train_rl import play_episode


def evaluate_agent(agent, corpus, num_games=config.NUM_EPISODES_EVAL, starting_lives=config.STARTING_LIVES,
                   debug=False, rng=None):
    """
    Evaluate the agent on random words from the corpus.

    Args:
        agent: Trained Q-learning agent
        corpus: Words to play
        num_games: Number of games to play
        starting_lives: Lives per game
        debug: Whether games print per-move logs
        rng: Random generator for word sampling and tie-breaking

    Returns:
        Dictionary with evaluation metrics
    """
    if rng is None:
        rng = np.random.default_rng()

    total_wins = 0
    total_wrong_guesses = 0
    total_moves = 0

    for _ in tqdm(range(num_games), desc="Playing games", disable=debug):
        game = HangmanGame(corpus.sample(rng), starting_lives=starting_lives, debug=debug)
        status = play_episode(agent, game, rng, learn=False)

        if status == Status.WON:
            total_wins += 1
        total_wrong_guesses += game.starting_lives - game.lives
        total_moves += len(game.attempted)

    return {
        'num_games': num_games,
        'total_wins': total_wins,
        'success_rate': total_wins / num_games if num_games else 0.0,
        'total_wrong_guesses': total_wrong_guesses,
        'avg_wrong_guesses': total_wrong_guesses / num_games if num_games else 0.0,
        'avg_moves': total_moves / num_games if num_games else 0.0,
    }


def print_evaluation_summary(results):
    print(f"\n{'=' * 60}")
    print("EVALUATION RESULTS")
    print(f"{'=' * 60}\n")

    print(f"Number of Games:        {results['num_games']}")
    print(f"Total Wins:             {results['total_wins']}")
    print(f"Success Rate:           {results['success_rate']:.2%}")
    print(f"\nTotal Wrong Guesses:    {results['total_wrong_guesses']}")
    print(f"Avg Wrong Guesses:      {results['avg_wrong_guesses']:.2f}")
    print(f"\nAvg Moves:              {results['avg_moves']:.2f}")


def main(argv=None):
    """Main evaluation function."""
    parser = argparse.ArgumentParser(description="Evaluate a trained Hangman agent")
    parser.add_argument("--wordlist", type=str, default=config.WORDLIST_PATH)
    parser.add_argument("--words", type=int, default=config.WORD_COUNT)
    parser.add_argument("--games", type=int, default=config.NUM_EPISODES_EVAL)
    parser.add_argument("--lives", type=int, default=config.STARTING_LIVES)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--model", type=str, default=os.path.join(config.RESULTS_DIR, config.Q_TABLE_FILE))
    parser.add_argument("--debug", action="store_true")
    args = parser.parse_args(argv)

    try:
        corpus = WordCorpus.from_file(args.wordlist, args.words)
    except (FileNotFoundError, CorpusExhausted) as e:
        print(f"\n{e}")
        sys.exit(1)

    if not os.path.exists(args.model):
        print(f"\nERROR: value table not found at {args.model}")
        print("Please run train_rl.py first!")
        sys.exit(1)

    agent = QTableAgent.load(args.model)

    results = evaluate_agent(
        agent=agent,
        corpus=corpus,
        num_games=args.games,
        starting_lives=args.lives,
        debug=args.debug,
        rng=np.random.default_rng(args.seed),
    )

    print_evaluation_summary(results)

    results_path = os.path.join(os.path.dirname(args.model) or '.', 'evaluation_results.json')
    with open(results_path, 'w') as f:
        json.dump(results, f, indent=4)

    print(f"\nEvaluation results saved to: {results_path}")


if __name__ == "__main__":
    main()
