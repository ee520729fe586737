"""
volume_usage.py
~~~~~~~~~~~~~~~
单个节点的卷挂载用量。可挂载卷数量随机型不同而不同，
调度前需要知道哪些 Pod 放上来会超过 driver 上限。

非线程安全：一个实例只由一个调度循环修改。
"""
from __future__ import annotations
from typing import Dict, NamedTuple

from .errors import VolumeLimitExceeded
from .volumes import Volumes


class PodKey(NamedTuple):
    namespace: str
    name: str

    def __str__(self):
        return f"{self.namespace}/{self.name}"


class VolumeUsage:
    __slots__ = ("volumes", "pod_volumes", "limits")

    def __init__(self):
        self.volumes = Volumes()                      # 所有 Pod 卷的并集
        self.pod_volumes: Dict[PodKey, Volumes] = {}  # 每个 Pod 贡献的卷
        self.limits: Dict[str, int] = {}              # driver → 上限

    def add_limit(self, driver: str, value: int) -> None:
        self.limits[driver] = value

    def exceeds_limits(self, vols: Volumes) -> VolumeLimitExceeded | None:
        """
        假设把 vols 放到本节点，检查是否有 driver 超限。
        不修改任何状态；超限时返回异常对象（不抛出），否则 None。
        """
        for driver, ids in self.volumes.union(vols).items():
            limit = self.limits.get(driver)
            if limit is not None and len(ids) > limit:
                return VolumeLimitExceeded(driver, len(ids), limit)
        return None

    def add(self, key: PodKey, vols: Volumes) -> None:
        """记录 Pod 的卷（覆盖同一 Pod 之前的记录）。不做上限校验。"""
        if key in self.pod_volumes:
            # 覆盖旧记录后并集可能缩小，只能重建
            self.pod_volumes[key] = vols.copy()
            self._rebuild()
            return
        self.pod_volumes[key] = vols.copy()
        self.volumes.insert(vols)

    def delete_pod(self, key: PodKey) -> None:
        if self.pod_volumes.pop(key, None) is None:
            return
        self._rebuild()

    def _rebuild(self) -> None:
        # 卷标识可能被多个 Pod 共享，不能做差集
        volumes = Volumes()
        for vols in self.pod_volumes.values():
            volumes.insert(vols)
        self.volumes = volumes

    def copy(self) -> "VolumeUsage":
        dup = VolumeUsage()
        dup.volumes = self.volumes.copy()
        dup.pod_volumes = {k: v.copy() for k, v in self.pod_volumes.items()}
        dup.limits = dict(self.limits)
        return dup

    def __repr__(self):
        return (f"VolumeUsage(pods={len(self.pod_volumes)}, "
                f"volumes={self.volumes}, limits={self.limits})")
