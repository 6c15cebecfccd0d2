# delivery_nav/domain/navigation/navigation_factory.py
from collections.abc import Iterable

from delivery_nav.config.models import MapRef, OptimizerUnion, RouterUnion, SpatialIndexModel
from delivery_nav.domain.navigation.navigation_core import Navigation
from delivery_nav.domain.street_graph import StreetGraph, StreetRecord
from delivery_nav.runtime.registries import make_optimizer, make_router, resolve_map


def build_graph(streets: Iterable[StreetRecord], index: SpatialIndexModel) -> StreetGraph:
    return StreetGraph.from_streets(
        streets, max_load_factor=index.max_load_factor, initial_buckets=index.initial_buckets
    )


def build_navigation(
    map_ref: MapRef | None,
    *,
    router: RouterUnion,
    optimizer: OptimizerUnion,
    index: SpatialIndexModel | None = None,
    streets: Iterable[StreetRecord] | None = None,
) -> Navigation:
    deps = {} if streets is None else {"streets": streets}
    index = index or SpatialIndexModel()
    graph = build_graph(resolve_map(map_ref, deps=deps), index)
    return Navigation(
        graph=graph,
        router=make_router(router, deps={"graph": graph, "index": index}),
        optimizer=make_optimizer(optimizer),
    )
