"""Training listeners."""

from trainreport.listeners.base import TrainingListener
from trainreport.listeners.events import At, Batch, Loss, Operation
from trainreport.listeners.group import ListenerGroup
from trainreport.listeners.score import ScoreReporter, create

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
