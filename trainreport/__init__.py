"""Progress reporting for training loops."""

from trainreport.listeners import (
    At,
    Batch,
    ListenerGroup,
    Loss,
    Operation,
    ScoreReporter,
    TrainingListener,
    create,
)

__all__ = [
    "At",
    "Batch",
    "ListenerGroup",
    "Loss",
    "Operation",
    "ScoreReporter",
    "TrainingListener",
    "create",
]

__version__ = "0.1.0"
