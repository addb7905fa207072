"""
Predictions package.

Contiene:
- model: forza squadra e probabilità (funzioni pure)
- pipeline: arricchimento delle partite non ancora giocate
"""
from .model import calculate_probabilities, calculate_team_strength  # noqa: F401
from .pipeline import attach_probabilities  # noqa: F401


__all__ = ["calculate_probabilities", "calculate_team_strength", "attach_probabilities"]
