"""
Tabular Q-learning agent.

This module implements a minimal Q-learning agent with:
- A value table keyed by (state key, action key)
- A one-step update rule with configurable learning rate and discount
- Greedy action selection with random tie-breaking

The agent only talks to the environment through the State, Action and
Rewarder contracts.
"""

import pickle
from collections import defaultdict
from typing import Dict

import numpy as np

from config import DISCOUNT, LEARNING_RATE
from contracts import Action, Agent, Rewarder, State, StateAction


class QTableAgent(Agent):
    """
    Q-learning agent backed by a nested dictionary.
    """

    def __init__(self, learning_rate: float = LEARNING_RATE, discount: float = DISCOUNT):
        """
        Initialize the agent.

        Args:
            learning_rate: Weight given to each new estimate
            discount: Discount factor for the next state's value
        """
        self.learning_rate = learning_rate
        self.discount = discount
        self.q: Dict[str, Dict[str, float]] = defaultdict(dict)

    def value(self, state: State, action: Action) -> float:
        """Current estimate for an action in a state, 0.0 if never seen."""
        actions = self.q.get(str(state))
        if actions is None:
            return 0.0
        return actions.get(str(action), 0.0)

    def learn(self, state_action: StateAction, rewarder: Rewarder):
        """
        Apply the action and update its value.

        The state key is read before the action is applied; the action then
        mutates the state and the reward is taken from the resulting state.

        Args:
            state_action: The state and the action chosen in it
            rewarder: Scores the state/action pair
        """
        current = str(state_action.state)
        action_key = str(state_action.action)
        next_key = str(state_action.action.apply(state_action.state))

        max_next_value = 0.0
        for value in self.q.get(next_key, {}).values():
            if value > max_next_value:
                max_next_value = value

        current_value = self.q[current].get(action_key, 0.0)
        reward = rewarder.reward(state_action)
        self.q[current][action_key] = current_value + self.learning_rate * (
            reward + self.discount * max_next_value - current_value
        )

    def __len__(self):
        """Number of states in the value table."""
        return len(self.q)

    def save(self, filepath: str):
        """Save the agent's value table."""
        with open(filepath, 'wb') as f:
            pickle.dump({
                'q': dict(self.q),
                'learning_rate': self.learning_rate,
                'discount': self.discount,
            }, f)
        print(f"Agent saved to {filepath}")

    @staticmethod
    def load(filepath: str) -> 'QTableAgent':
        """Load an agent's value table from a file."""
        with open(filepath, 'rb') as f:
            checkpoint = pickle.load(f)
        agent = QTableAgent(checkpoint['learning_rate'], checkpoint['discount'])
        agent.q.update(checkpoint['q'])
        print(f"Agent loaded from {filepath}")
        return agent


def next_action(agent: Agent, state: State, rng: np.random.Generator) -> StateAction:
    """
    Select the best action for a state, breaking ties at random.

    Args:
        agent: Provides the value estimates
        state: Current state
        rng: Random generator used for tie-breaking

    Returns:
        StateAction holding the chosen action and its value

    Raises:
        ValueError: If the state has no legal actions
    """
    actions = state.next()
    if not actions:
        raise ValueError(f"No actions available from state {state}")

    values = np.array([agent.value(state, action) for action in actions])
    best = np.flatnonzero(values == values.max())
    idx = int(rng.choice(best))

    return StateAction(state, actions[idx], float(values[idx]))
