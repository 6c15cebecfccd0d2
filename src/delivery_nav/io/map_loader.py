# delivery_nav/io/map_loader.py
"""
Map source adapters.

Both formats yield StreetRecord values for StreetGraph.load_from; the graph
itself never sees the encoding.

Text format, repeated per street::

    Main Street
    2
    34.0500000 -118.4900000 34.0510000 -118.4900000
    34.0510000 -118.4900000 34.0520000 -118.4910000
"""

import json
from collections.abc import Iterable, Iterator

from delivery_nav.domain.entities.geography import Coordinate
from delivery_nav.domain.street_graph import StreetRecord


class MapFormatError(ValueError):
    def __init__(self, msg: str, *, line: int | None = None):
        super().__init__(f"line {line}: {msg}" if line is not None else msg)
        self.line = line


def _check_numbers(values, *, line: int | None = None, where: str = "") -> None:
    for p in values:
        try:
            float(p)
        except (TypeError, ValueError):
            raise MapFormatError(f"{where}not a number: {p!r}", line=line) from None


def parse_text(lines: Iterable[str]) -> Iterator[StreetRecord]:
    it = enumerate((ln.rstrip("\r\n") for ln in lines), start=1)
    for lineno, name in it:
        if not name.strip():
            continue
        try:
            count_no, count_txt = next(it)
        except StopIteration:
            raise MapFormatError(f"street {name!r} has no segment count", line=lineno) from None
        try:
            n = int(count_txt.strip())
        except ValueError:
            raise MapFormatError(f"bad segment count {count_txt!r}", line=count_no) from None
        if n < 0:
            raise MapFormatError(f"negative segment count {n}", line=count_no)

        segments = []
        for _ in range(n):
            try:
                seg_no, seg_txt = next(it)
            except StopIteration:
                raise MapFormatError(
                    f"street {name!r} ends before its {n} segments", line=count_no
                ) from None
            parts = seg_txt.split()
            if len(parts) != 4:
                raise MapFormatError(f"expected 4 values, got {len(parts)}", line=seg_no)
            _check_numbers(parts, line=seg_no)
            segments.append((Coordinate(parts[0], parts[1]), Coordinate(parts[2], parts[3])))
        yield StreetRecord(name, tuple(segments))


def parse_json(data) -> Iterator[StreetRecord]:
    if not isinstance(data, list):
        raise MapFormatError("expected a list of streets")
    for i, street in enumerate(data):
        try:
            name = street["name"]
            pairs = [(tuple(a), tuple(b)) for a, b in street["segments"]]
        except (KeyError, TypeError, ValueError) as exc:
            raise MapFormatError(f"street #{i}: {exc}") from exc
        for a, b in pairs:
            if len(a) != 2 or len(b) != 2:
                raise MapFormatError(f"street #{i}: coordinates need 2 values")
            _check_numbers((*a, *b), where=f"street #{i}: ")
        segs = tuple((Coordinate.of(*a), Coordinate.of(*b)) for a, b in pairs)
        yield StreetRecord(name, segs)


def load_streets(file: str, fmt: str = "text") -> list[StreetRecord]:
    if not file:
        raise MapFormatError("no map file given")
    if fmt not in ("text", "json"):
        raise ValueError(f"Unsupported map fmt {fmt!r}")
    with open(file, encoding="utf-8") as f:
        try:
            if fmt == "text":
                return list(parse_text(f))
            data = json.load(f)
        except UnicodeDecodeError as exc:
            raise MapFormatError(f"not UTF-8 text: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise MapFormatError(str(exc), line=exc.lineno) from exc
    return list(parse_json(data))
