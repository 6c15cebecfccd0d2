import pytest
from pydantic import ValidationError

from delivery_nav.config.models import (
    MapByPath,
    OptimizerIdentityModel,
    ScenarioModel,
)
from delivery_nav.domain.entities.geography import Coordinate


def _base(**over):
    cfg = {
        "name": "t",
        "map": {"by": "inline", "streets": []},
        "depot": ["34.0", "-118.0"],
    }
    cfg.update(over)
    return cfg


def test_defaults():
    m = ScenarioModel.model_validate(_base())
    assert m.router.kind == "bfs"
    assert m.optimizer.kind == "nearest_neighbor"
    assert m.planner.first_leg == "original"
    assert m.index.max_load_factor == 0.5 and m.index.initial_buckets == 8
    assert m.depot_coordinate() == Coordinate("34.0", "-118.0")
    assert m.delivery_requests() == []


def test_numbers_and_dicts_become_text():
    m = ScenarioModel.model_validate(
        _base(
            depot={"lat": 34.5, "lon": -118},
            deliveries=[{"item": "pen", "location": [1.25, 2]}],
        )
    )
    assert m.depot == ("34.5", "-118")
    assert m.delivery_requests()[0].location == Coordinate("1.25", "2")


def test_discriminated_unions():
    m = ScenarioModel.model_validate(
        _base(optimizer={"kind": "identity"}, map={"by": "path", "file": "x.txt"})
    )
    assert isinstance(m.optimizer, OptimizerIdentityModel)
    assert isinstance(m.map, MapByPath) and m.map.fmt == "text"


@pytest.mark.parametrize(
    "over",
    [
        {"surprise": 1},
        {"optimizer": {"kind": "two_opt"}},
        {"index": {"max_load_factor": 0}},
        {"planner": {"first_leg": "sometimes"}},
        {"depot": ["1"]},
    ],
)
def test_invalid_config_rejected(over):
    with pytest.raises(ValidationError):
        ScenarioModel.model_validate(_base(**over))


def test_map_path_expands_user(monkeypatch):
    monkeypatch.setenv("MAPS", "/data/maps")
    assert MapByPath(file="$MAPS/la.txt").file == "/data/maps/la.txt"


@pytest.mark.parametrize(
    "over",
    [
        {"depot": ["north", "pole"]},
        {"deliveries": [{"item": "pen", "location": ["34.0", "west"]}]},
        {
            "map": {
                "by": "inline",
                "streets": [{"name": "Main", "segments": [[["abc", "0"], ["0", "1"]]]}],
            }
        },
    ],
)
def test_non_numeric_coordinates_rejected(over):
    with pytest.raises(ValidationError, match="not a number"):
        ScenarioModel.model_validate(_base(**over))
