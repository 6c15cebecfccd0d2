# tests/conftest.py
from types import SimpleNamespace

import pytest

from delivery_nav.domain.entities.geography import Coordinate
from delivery_nav.domain.street_graph import StreetGraph, StreetRecord

# Square block, ~0.001 deg a side:
#
#   C ---- Oak Avenue ---- B
#   |                      |
# Pine Lane            Elm Street (via M)
#   |                      |
#   D ---- Depot Road ---- A
D = Coordinate("34.0000000", "-118.0000000")
A = Coordinate("34.0000000", "-117.9990000")
M = Coordinate("34.0005000", "-117.9990000")
B = Coordinate("34.0010000", "-117.9990000")
C = Coordinate("34.0010000", "-118.0000000")

# unconnected to the block
X = Coordinate("35.0000000", "-119.0000000")
Y = Coordinate("35.0010000", "-119.0000000")

BLOCK = [
    StreetRecord("Depot Road", ((D, A),)),
    StreetRecord("Elm Street", ((A, M), (M, B))),
    StreetRecord("Oak Avenue", ((B, C),)),
    StreetRecord("Pine Lane", ((C, D),)),
]
ISLAND = [StreetRecord("Island Way", ((X, Y),))]


@pytest.fixture
def pts():
    return SimpleNamespace(D=D, A=A, M=M, B=B, C=C, X=X, Y=Y)


@pytest.fixture
def block_streets():
    return list(BLOCK)


@pytest.fixture
def graph() -> StreetGraph:
    return StreetGraph.from_streets(BLOCK + ISLAND)
