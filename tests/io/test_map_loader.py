import io
import json

import pytest

from delivery_nav.domain.entities.geography import Coordinate
from delivery_nav.io.map_loader import MapFormatError, load_streets, parse_json, parse_text

TEXT_MAP = """\
10th Helena Drive
1
34.0547000 -118.4794734 34.0544590 -118.4801137
Acacia Avenue
2
34.0200 -118.5000 34.0210 -118.5000
34.0210 -118.5000 34.0220 -118.5010
"""


def test_parse_text_keeps_coordinates_textual():
    streets = list(parse_text(io.StringIO(TEXT_MAP)))
    assert [s.name for s in streets] == ["10th Helena Drive", "Acacia Avenue"]
    start, end = streets[0].segments[0]
    assert start == Coordinate("34.0547000", "-118.4794734")
    assert end == Coordinate("34.0544590", "-118.4801137")
    assert len(streets[1].segments) == 2


def test_blank_lines_between_streets_are_skipped():
    streets = list(parse_text(io.StringIO("\n" + TEXT_MAP + "\n\n")))
    assert len(streets) == 2


@pytest.mark.parametrize(
    "text, line",
    [
        ("Main\nmany\n", 2),
        ("Main\n2\n1 2 3 4\n", 2),
        ("Main\n1\n1 2 3\n", 3),
        ("Main\n1\n1 2 x 4\n", 3),
        ("Main\n", 1),
    ],
)
def test_malformed_text_reports_line(text, line):
    with pytest.raises(MapFormatError) as ei:
        list(parse_text(io.StringIO(text)))
    assert ei.value.line == line


def test_parse_json():
    data = [{"name": "Main", "segments": [[["34.1", "-118.2"], ["34.2", "-118.2"]]]}]
    (street,) = parse_json(data)
    assert street.name == "Main"
    assert street.segments[0][1] == Coordinate("34.2", "-118.2")

    with pytest.raises(MapFormatError):
        list(parse_json([{"segments": []}]))
    with pytest.raises(MapFormatError):
        list(parse_json({"name": "not a list"}))


def test_load_streets_from_files(tmp_path):
    txt = tmp_path / "map.txt"
    txt.write_text(TEXT_MAP)
    assert len(load_streets(str(txt))) == 2

    js = tmp_path / "map.json"
    js.write_text(json.dumps([{"name": "Main", "segments": [[[1, 2], [3, 4]]]}]))
    (street,) = load_streets(str(js), "json")
    assert street.segments[0][0] == Coordinate("1", "2")

    bad = tmp_path / "bad.json"
    bad.write_text("[{")
    with pytest.raises(MapFormatError):
        load_streets(str(bad), "json")


def test_load_streets_rejects_empty_path_and_unknown_format(tmp_path):
    with pytest.raises(MapFormatError):
        load_streets("")
    with pytest.raises(ValueError):
        load_streets(str(tmp_path / "x"), "graphml")


@pytest.mark.parametrize(
    "segments",
    [
        [[["abc", "0"], ["0", "1"]]],
        [[["0", "0"], ["0", None]]],
        [[["0", "0", "0"], ["0", "1"]]],
    ],
)
def test_parse_json_rejects_bad_coordinates(segments):
    with pytest.raises(MapFormatError):
        list(parse_json([{"name": "Main", "segments": segments}]))


def test_text_map_that_is_not_utf8(tmp_path):
    path = tmp_path / "map.txt"
    path.write_bytes(b"Main\n1\n\xff\xfe 0 0 1\n")
    with pytest.raises(MapFormatError, match="UTF-8"):
        load_streets(str(path))
