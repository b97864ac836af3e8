"""Seed management for reproducible tests and benchmarks."""

import random

import numpy as np


def seed_everything(seed: int) -> None:
    """Set all random seeds for deterministic behavior.

    Sets seeds for Python random, NumPy, and PyTorch.

    Args:
        seed: Random seed value (should be non-negative integer)
    """
    import torch

    random.seed(seed)
    np.random.seed(seed)
    torch.manual_seed(seed)
