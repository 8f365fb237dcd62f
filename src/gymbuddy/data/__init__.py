"""Data loading utilities."""

from .exercise_loader import load_seed_exercises, seed_exercises_if_empty

__all__ = ["load_seed_exercises", "seed_exercises_if_empty"]
