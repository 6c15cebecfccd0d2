import os
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from delivery_nav.domain.entities.delivery import DeliveryRequest
from delivery_nav.domain.entities.geography import Coordinate

# Coordinates travel as text so they match map keys exactly ("34.0500" != "34.05").
CoordText = tuple[str, str]


def _coord_to_text(v):
    if isinstance(v, dict) and v.keys() == {"lat", "lon"}:
        v = (v["lat"], v["lon"])
    if isinstance(v, (list, tuple)) and len(v) == 2:
        text = tuple(str(x) for x in v)
        for t in text:
            try:
                float(t)
            except ValueError:
                raise ValueError(f"coordinate value {t!r} is not a number") from None
        return text
    return v


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False


class SpatialIndexModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    initial_buckets: int = Field(default=8, ge=1)
    max_load_factor: float = Field(default=0.5, gt=0)


# ----------------- MAP SOURCES ---------------------


class StreetModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    segments: list[tuple[CoordText, CoordText]]

    @field_validator("segments", mode="before")
    @classmethod
    def _text_coords(cls, v):
        return [tuple(_coord_to_text(p) for p in seg) for seg in v]


class MapByPath(BaseModel):
    model_config = ConfigDict(extra="forbid")
    by: Literal["path"] = "path"
    file: str
    fmt: Literal["text", "json"] = "text"
    must_exist: bool = True

    @field_validator("file")
    @classmethod
    def _expand(cls, v: str) -> str:
        return os.path.expandvars(os.path.expanduser(v))


class MapInline(BaseModel):
    model_config = ConfigDict(extra="forbid")
    by: Literal["inline"] = "inline"
    streets: list[StreetModel] = Field(default_factory=list)


MapRef = Annotated[MapByPath | MapInline, Field(discriminator="by")]

# ----------------- ROUTERS ---------------------


class RouterBreadthFirstModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["bfs"] = "bfs"


RouterUnion = Annotated[RouterBreadthFirstModel, Field(discriminator="kind")]

# ----------------- OPTIMIZERS ---------------------


class OptimizerNearestNeighborModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["nearest_neighbor"] = "nearest_neighbor"


class OptimizerIdentityModel(BaseModel):
    """Keep input order; baseline runs."""

    model_config = ConfigDict(extra="forbid")
    kind: Literal["identity"] = "identity"


OptimizerUnion = Annotated[
    OptimizerNearestNeighborModel | OptimizerIdentityModel, Field(discriminator="kind")
]

# ----------------- PLANNER ---------------------


class PlannerModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    first_leg: Literal["original", "optimized"] = "original"
    units: Literal["miles", "km"] = "miles"


# ------------------------------------------------------------------


class DeliveryModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    item: str
    location: CoordText

    @field_validator("location", mode="before")
    @classmethod
    def _text(cls, v):
        return _coord_to_text(v)

    def to_request(self) -> DeliveryRequest:
        return DeliveryRequest(self.item, Coordinate(*self.location))


class ScenarioModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    run_id: str = "local"
    map: MapRef
    depot: CoordText
    deliveries: list[DeliveryModel] = Field(default_factory=list)
    index: SpatialIndexModel = SpatialIndexModel()
    router: RouterUnion = Field(default_factory=RouterBreadthFirstModel)
    optimizer: OptimizerUnion = Field(default_factory=OptimizerNearestNeighborModel)
    planner: PlannerModel = PlannerModel()
    log: LogModel = LogModel()

    @field_validator("depot", mode="before")
    @classmethod
    def _depot_text(cls, v):
        return _coord_to_text(v)

    def depot_coordinate(self) -> Coordinate:
        return Coordinate(*self.depot)

    def delivery_requests(self) -> list[DeliveryRequest]:
        return [d.to_request() for d in self.deliveries]
