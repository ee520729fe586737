"""
volumes.py
~~~~~~~~~~
driver 名 → 去重后的卷标识集合。
只通过 add / union / insert 修改，保证：
  • 不存在空集合的 driver 条目
  • 同一 driver 下相同卷标识只记一次
"""
from __future__ import annotations
from typing import Dict, FrozenSet, Iterable, Iterator, Set, Tuple


class Volumes:
    __slots__ = ("_by_driver",)

    def __init__(self, entries: Dict[str, Iterable[str]] | None = None):
        self._by_driver: Dict[str, Set[str]] = {}
        for driver, ids in (entries or {}).items():
            for vid in ids:
                self.add(driver, vid)

    # —— 修改 —— #
    def add(self, driver: str, volume_id: str) -> None:
        if not driver:
            raise ValueError("driver name must not be empty")
        self._by_driver.setdefault(driver, set()).add(volume_id)

    def union(self, other: "Volumes") -> "Volumes":
        """返回新的集合，两个输入都不变"""
        out = self.copy()
        out.insert(other)
        return out

    def insert(self, other: "Volumes") -> None:
        """原地合并 other"""
        for driver, ids in other._by_driver.items():
            self._by_driver.setdefault(driver, set()).update(ids)

    def copy(self) -> "Volumes":
        dup = Volumes()
        dup._by_driver = {d: set(ids) for d, ids in self._by_driver.items()}
        return dup

    # —— 查询 —— #
    def get(self, driver: str) -> FrozenSet[str]:
        return frozenset(self._by_driver.get(driver, ()))

    def count(self, driver: str) -> int:
        return len(self._by_driver.get(driver, ()))

    def drivers(self) -> list[str]:
        return list(self._by_driver)

    def items(self) -> Iterator[Tuple[str, FrozenSet[str]]]:
        for driver, ids in self._by_driver.items():
            yield driver, frozenset(ids)

    def __contains__(self, driver: str) -> bool:
        return driver in self._by_driver

    def __len__(self):
        return len(self._by_driver)

    def __bool__(self):
        return bool(self._by_driver)

    def __eq__(self, other):
        if not isinstance(other, Volumes):
            return NotImplemented
        return self._by_driver == other._by_driver

    def __repr__(self):
        body = ", ".join(f"{d}={sorted(ids)}" for d, ids in sorted(self._by_driver.items()))
        return f"Volumes({body})"
