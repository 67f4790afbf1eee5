import numpy as np
import pytest
from sklearn.datasets import make_classification
from sklearn.linear_model import LogisticRegression
from sklearn.model_selection import KFold, RepeatedKFold

from model_grid import Failure, ModelGrid, TrainingFailureWarning
from model_grid.training import FittedModel, SklearnTrainer, build_splitter


@pytest.fixture
def data():
    return make_classification(n_samples=60, n_features=5, random_state=0)


def test_fit_without_resampling(data):
    x, y = data
    estimator = LogisticRegression()

    fitted = SklearnTrainer().fit({"estimator": estimator, "x": x, "y": y})

    assert isinstance(fitted, FittedModel)
    assert fitted.resample_scores is None
    assert fitted.mean_score is None
    assert fitted.estimator is not estimator
    assert hasattr(fitted.estimator, "coef_")
    assert not hasattr(estimator, "coef_")


def test_params_are_applied(data):
    x, y = data

    fitted = SklearnTrainer().fit(
        {"estimator": LogisticRegression(), "x": x, "y": y, "params": {"C": 0.01}}
    )

    assert fitted.estimator.C == 0.01


def test_cross_validation_scores(data):
    x, y = data
    config = {
        "estimator": LogisticRegression(),
        "x": x,
        "y": y,
        "metric": "accuracy",
        "trControl": {"method": "cv", "number": 3},
    }

    fitted = SklearnTrainer().fit(config)

    assert len(fitted.resample_scores) == 3
    assert 0.0 <= fitted.mean_score <= 1.0
    assert fitted.metric == "accuracy"


def test_build_splitter():
    assert build_splitter({}) is None
    assert isinstance(build_splitter({"method": "cv", "number": 4}), KFold)
    splitter = build_splitter({"method": "repeatedcv", "number": 3, "repeats": 2})
    assert isinstance(splitter, RepeatedKFold)
    assert splitter.get_n_splits() == 6
    with pytest.raises(ValueError):
        build_splitter({"method": "boot"})


def test_missing_estimator_is_rejected(data):
    x, y = data

    with pytest.raises(ValueError):
        SklearnTrainer().fit({"x": x, "y": y})


def test_grid_models_share_resamples(data):
    x, y = data
    grid = (
        ModelGrid()
        .share_settings(x=x, y=y, metric="accuracy", trControl={"method": "cv", "number": 4})
        .add_model(name="LR1", estimator=LogisticRegression())
        .add_model(name="LR2", estimator=LogisticRegression())
    )

    grid.train(SklearnTrainer(), resample_seed=42)

    np.testing.assert_allclose(
        grid.model_fits["LR1"].resample_scores,
        grid.model_fits["LR2"].resample_scores,
    )


def test_custom_control_reaches_trainer(data):
    x, y = data
    grid = (
        ModelGrid()
        .share_settings(x=x, y=y, trControl={"method": "cv", "number": 4})
        .add_model(name="LR", estimator=LogisticRegression(), custom_control={"number": 2})
    )

    grid.train(SklearnTrainer())

    assert len(grid.model_fits["LR"].resample_scores) == 2


def test_invalid_control_is_captured_as_failure(data):
    x, y = data
    grid = (
        ModelGrid()
        .share_settings(x=x, y=y)
        .add_model(name="bad", estimator=LogisticRegression(), trControl={"method": "boot"})
        .add_model(name="good", estimator=LogisticRegression())
    )

    with pytest.warns(TrainingFailureWarning, match="bad"):
        grid.train(SklearnTrainer())

    assert isinstance(grid.model_fits["bad"], Failure)
    assert grid.model_fits["good"].artifact.estimator.coef_.shape == (1, 5)
