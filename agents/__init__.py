from agents.base import Agent
from agents.random import RandomAgent
from agents.greedy import GreedyAgent

__all__ = [
    "Agent",
    "RandomAgent",
    "GreedyAgent",
]
