"""
Capability contracts between an environment and a decision engine.

An environment exposes a State (canonical key, legal actions, completion
status), Actions that transform a State, and a Rewarder that scores a
StateAction without changing anything.
"""

import abc
from dataclasses import dataclass
from typing import List


class State(abc.ABC):
    @abc.abstractmethod
    def __str__(self) -> str:
        """Canonical key used to index the value table."""

    @abc.abstractmethod
    def next(self) -> List['Action']:
        """Actions that are legal from this state."""

    @abc.abstractmethod
    def is_complete(self) -> int:
        ...


class Action(abc.ABC):
    @abc.abstractmethod
    def __str__(self) -> str:
        """Canonical action identifier."""

    @abc.abstractmethod
    def apply(self, state: State) -> State:
        ...


@dataclass
class StateAction:
    state: State
    action: Action
    value: float = 0.0


class Rewarder(abc.ABC):
    @abc.abstractmethod
    def reward(self, state_action: StateAction) -> float:
        """Score a state/action pair. Must not mutate the state."""


class Agent(abc.ABC):
    @abc.abstractmethod
    def learn(self, state_action: StateAction, rewarder: Rewarder) -> None:
        ...

    @abc.abstractmethod
    def value(self, state: State, action: Action) -> float:
        ...
