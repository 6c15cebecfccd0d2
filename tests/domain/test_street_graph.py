from delivery_nav.domain.entities.geography import Coordinate, Segment
from delivery_nav.domain.street_graph import StreetGraph, StreetRecord


def test_unregistered_coordinate_is_not_found(graph):
    assert graph.segments_starting_at(Coordinate("0", "0")) is None
    assert Coordinate("0", "0") not in graph


def test_every_segment_has_its_reverse(graph):
    for c in graph.coordinates():
        for seg in graph.segments_starting_at(c):
            back = graph.segments_starting_at(seg.end)
            assert Segment(seg.end, seg.start, seg.name) in back


def test_segments_accumulate_per_coordinate(graph, pts):
    out = graph.segments_starting_at(pts.A)
    assert {(s.end, s.name) for s in out} == {(pts.D, "Depot Road"), (pts.M, "Elm Street")}
    assert all(s.start == pts.A for s in out)


def test_counts(graph):
    # 5 block corners/midpoints + 2 island points; 6 segments loaded, 12 directed
    assert graph.n_coordinates == 7
    assert graph.n_segments == 12


def test_coordinate_equality_is_textual():
    g = StreetGraph.from_streets(
        [StreetRecord("Main", ((Coordinate("34.05", "-118.4"), Coordinate("34.06", "-118.4")),))]
    )
    assert g.segments_starting_at(Coordinate("34.05", "-118.4")) is not None
    assert g.segments_starting_at(Coordinate("34.0500", "-118.4")) is None


def test_load_from_appends_to_existing_graph(graph, pts):
    extra = Coordinate("34.0000000", "-117.9980000")
    added = graph.load_from([StreetRecord("Spur", ((pts.A, extra),))])
    assert added == 2
    names = {s.name for s in graph.segments_starting_at(pts.A)}
    assert names == {"Depot Road", "Elm Street", "Spur"}


def test_growth_keeps_all_coordinates():
    coords = [Coordinate(str(i), "0") for i in range(60)]
    streets = [StreetRecord(f"s{i}", ((coords[i], coords[i + 1]),)) for i in range(59)]
    g = StreetGraph.from_streets(streets, max_load_factor=0.5, initial_buckets=2)
    assert g.n_coordinates == 60
    assert all(g.segments_starting_at(c) for c in coords)
