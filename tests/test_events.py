import pytest
import torch

from trainreport.listeners.events import At, Batch, Loss, Operation


def test_at_defaults_to_training() -> None:
    at = At(epoch=1, iteration=20)
    assert at.operation is Operation.TRAINING


def test_batch_size_comes_from_first_feature_array() -> None:
    batch = Batch.of([torch.zeros(16, 3, 8, 8), torch.zeros(4, 1)], torch.zeros(16))
    assert batch.num_feature_arrays() == 2
    assert batch.batch_size() == 16
    assert len(batch.labels) == 1


def test_batch_size_is_none_without_usable_features() -> None:
    assert Batch().batch_size() is None
    assert Batch.of([None]).batch_size() is None
    assert Batch.of(torch.tensor(3.0)).batch_size() is None


def test_loss_from_tensors_detaches_scalars() -> None:
    weight = torch.tensor(2.0, requires_grad=True)
    loss = Loss.from_tensors({"mse": weight * 0.25, "l2": 0.25})
    assert loss.names == ("mse", "l2")
    assert loss.total_loss() == pytest.approx(0.75)
    assert loss.as_dict() == {"mse": 0.5, "l2": 0.25}


def test_loss_rejects_non_scalar_tensors() -> None:
    with pytest.raises(ValueError, match="must be a scalar"):
        _ = Loss.from_tensors({"mse": torch.ones(3)})


def test_loss_rejects_mismatched_lengths() -> None:
    with pytest.raises(ValueError, match="length mismatch"):
        _ = Loss(names=("a", "b"), values=(1.0,))
