# delivery_nav/domain/spatial_index.py
from collections.abc import Hashable, Iterator
from typing import Generic, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

INITIAL_BUCKETS = 8


class SpatialIndex(Generic[K, V]):
    """
    Separate-chaining hash table with automatic growth.

    Each bucket is a list of [key, value] pairs. After an insert pushes the
    load factor (entries / buckets) above `max_load_factor`, the bucket count
    doubles and every entry is re-bucketed against the new count.
    """

    def __init__(self, max_load_factor: float = 0.5, initial_buckets: int = INITIAL_BUCKETS):
        if max_load_factor <= 0:
            raise ValueError("max_load_factor must be > 0")
        if initial_buckets < 1:
            raise ValueError("initial_buckets must be >= 1")
        self.max_load_factor = max_load_factor
        self._initial_buckets = initial_buckets
        self.reset()

    def reset(self) -> None:
        self._buckets: list[list[list]] = [[] for _ in range(self._initial_buckets)]
        self._n = 0

    def size(self) -> int:
        return self._n

    def __len__(self) -> int:
        return self._n

    @property
    def bucket_count(self) -> int:
        return len(self._buckets)

    @property
    def load_factor(self) -> float:
        return self._n / len(self._buckets)

    def _bucket(self, key: K) -> list[list]:
        return self._buckets[hash(key) % len(self._buckets)]

    def associate(self, key: K, value: V) -> None:
        bucket = self._bucket(key)
        for pair in bucket:
            if pair[0] == key:
                pair[1] = value
                return
        bucket.append([key, value])
        self._n += 1
        if self.load_factor > self.max_load_factor:
            self._rehash()

    def find(self, key: K) -> V | None:
        for k, v in self._bucket(key):
            if k == key:
                return v
        return None

    def __contains__(self, key: K) -> bool:
        return any(k == key for k, _ in self._bucket(key))

    def items(self) -> Iterator[tuple[K, V]]:
        for bucket in self._buckets:
            for k, v in bucket:
                yield k, v

    def _rehash(self) -> None:
        old = self._buckets
        self._buckets = [[] for _ in range(len(old) * 2)]
        for bucket in old:
            for pair in bucket:
                # keys are already unique; no equality scan needed
                self._bucket(pair[0]).append(pair)
