"""Payloads delivered by a training engine to its listeners."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum

import torch


class Operation(Enum):
    """Kind of engine pass that produced an event."""

    TRAINING = "training"
    TRAINING_VALIDATION = "training_validation"
    INFERENCE = "inference"
    EVALUATION = "evaluation"


@dataclass(frozen=True)
class At:
    """Position of the engine when an event fires."""

    epoch: int
    iteration: int
    operation: Operation = Operation.TRAINING


@dataclass(frozen=True)
class Batch:
    """Data batch descriptor.

    Feature arrays keep the engine's order; entries may be ``None`` when an
    input slot is unused for the current step. The batch size is the first
    dimension of the first feature array.
    """

    features: tuple[torch.Tensor | None, ...] = ()
    labels: tuple[torch.Tensor | None, ...] = ()

    @classmethod
    def of(
        cls,
        features: Sequence[torch.Tensor | None] | torch.Tensor,
        labels: Sequence[torch.Tensor | None] | torch.Tensor = (),
    ) -> Batch:
        """Build a batch from single tensors or sequences of tensors."""
        if isinstance(features, torch.Tensor):
            features = (features,)
        if isinstance(labels, torch.Tensor):
            labels = (labels,)
        return cls(features=tuple(features), labels=tuple(labels))

    def num_feature_arrays(self) -> int:
        return len(self.features)

    def feature(self, index: int) -> torch.Tensor | None:
        return self.features[index]

    def batch_size(self) -> int | None:
        """First-dimension size of feature array 0, or None when absent."""
        if self.num_feature_arrays() == 0:
            return None
        first = self.feature(0)
        if first is None or len(first.shape) == 0:
            return None
        return int(first.shape[0])


@dataclass(frozen=True)
class Loss:
    """Named loss components for one iteration."""

    names: tuple[str, ...] = ()
    values: tuple[float, ...] = ()

    def __post_init__(self) -> None:
        if len(self.names) != len(self.values):
            raise ValueError(
                f"Loss names/values length mismatch: "
                f"{len(self.names)} != {len(self.values)}"
            )

    @classmethod
    def single(cls, value: float, name: str = "loss") -> Loss:
        return cls(names=(name,), values=(float(value),))

    @classmethod
    def from_tensors(cls, losses: Mapping[str, torch.Tensor | float]) -> Loss:
        """Detach scalar tensors into plain floats, keeping mapping order."""
        names: list[str] = []
        values: list[float] = []
        for name, value in losses.items():
            if isinstance(value, torch.Tensor):
                if value.numel() != 1:
                    shape = tuple(value.shape)
                    raise ValueError(
                        f"Loss '{name}' must be a scalar, got shape={shape}"
                    )
                value = value.detach().item()
            names.append(name)
            values.append(float(value))
        return cls(names=tuple(names), values=tuple(values))

    def total_loss(self) -> float:
        return float(sum(self.values))

    def as_dict(self) -> dict[str, float]:
        return dict(zip(self.names, self.values))
