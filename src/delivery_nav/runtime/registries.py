# runtime/registries.py
from collections.abc import Callable
from typing import Any

from delivery_nav.app.protocols import OrderOptimizer, PointToPointRouter
from delivery_nav.config.models import (
    MapByPath,
    MapInline,
    MapRef,
    OptimizerIdentityModel,
    OptimizerNearestNeighborModel,
    OptimizerUnion,
    RouterBreadthFirstModel,
    RouterUnion,
)
from delivery_nav.domain.entities.geography import Coordinate
from delivery_nav.domain.navigation.navigation_optimizers import (
    IdentityOptimizer,
    NearestNeighborOptimizer,
)
from delivery_nav.domain.navigation.navigation_routers import BreadthFirstRouter
from delivery_nav.domain.street_graph import StreetRecord
from delivery_nav.runtime.resources import load_map_from_path

RouterFactory = Callable[[RouterUnion, dict], PointToPointRouter]
OptimizerFactory = Callable[[OptimizerUnion, dict], OrderOptimizer]

_router_registry: dict[str, RouterFactory] = {}
_optimizer_registry: dict[str, OptimizerFactory] = {}


# ---------------------- Map sources ----------------------------


def resolve_map(ref: MapRef | None, *, deps: dict | None = None) -> tuple[StreetRecord, ...]:
    """
    deps can include:
      - 'streets': Iterable[StreetRecord]  # a direct fallback/default
    """
    deps = deps or {}
    if ref is None:
        if "streets" in deps:
            return tuple(deps["streets"])
        raise ValueError("No map provided")
    if isinstance(ref, MapInline):
        return tuple(
            StreetRecord(s.name, tuple((Coordinate(*a), Coordinate(*b)) for a, b in s.segments))
            for s in ref.streets
        )
    if isinstance(ref, MapByPath):
        streets = load_map_from_path(ref.file, ref.fmt)
        if streets is None:
            if ref.must_exist:
                raise FileNotFoundError(ref.file)
            return ()
        return streets
    raise TypeError(ref)


# --------------------- Routers  ---------------------


def register_router(kind: str):
    def deco(fn: RouterFactory):
        _router_registry[kind] = fn
        return fn

    return deco


def make_router(cfg: RouterUnion, *, deps: dict) -> PointToPointRouter:
    try:
        factory = _router_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown router kind {cfg.kind!r}") from None
    return factory(cfg, deps)


@register_router("bfs")
def _make_bfs(cfg: RouterBreadthFirstModel, deps: dict[str, Any]):
    index = deps.get("index")
    if index is None:
        return BreadthFirstRouter(deps["graph"])
    return BreadthFirstRouter(deps["graph"], max_load_factor=index.max_load_factor)


# --------------------- Optimizers ---------------------


def register_optimizer(kind: str):
    def deco(fn: OptimizerFactory):
        _optimizer_registry[kind] = fn
        return fn

    return deco


def make_optimizer(cfg: OptimizerUnion, *, deps: dict | None = None) -> OrderOptimizer:
    try:
        factory = _optimizer_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown optimizer kind {cfg.kind!r}") from None
    return factory(cfg, deps or {})


@register_optimizer("nearest_neighbor")
def _make_nearest(cfg: OptimizerNearestNeighborModel, deps):
    return NearestNeighborOptimizer()


@register_optimizer("identity")
def _make_identity(cfg: OptimizerIdentityModel, deps):
    return IdentityOptimizer()
