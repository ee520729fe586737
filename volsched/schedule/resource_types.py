"""
resource_types.py
~~~~~~~~~~~~~~~~~
轻量级 Pod / Node 抽象，只保留卷调度所需字段。
"""
from __future__ import annotations
from typing import Dict

from .errors import VolumeLimitExceeded
from .volume_usage import PodKey, VolumeUsage
from .volumes import Volumes


class Pod:
    """Kubernetes Pod 的极简描述（仅卷维度）"""
    __slots__ = ("name", "namespace", "volumes", "labels")

    def __init__(self,
                 name: str,
                 namespace: str,
                 volumes: Volumes | None = None,
                 labels: Dict[str, str] | None = None,
                 ):
        self.name = name
        self.namespace = namespace
        self.volumes = volumes if volumes is not None else Volumes()
        self.labels = labels or {}

    # —— 方便打印 / 去重 —— #
    @property
    def full_name(self) -> str:
        return f"{self.namespace}/{self.name}"

    @property
    def key(self) -> PodKey:
        return PodKey(self.namespace, self.name)

    def __hash__(self):           # 允许放入 set / dict
        return hash(self.full_name)

    def __repr__(self):
        return f"Pod({self.full_name}, volumes={self.volumes})"


class Node:
    """节点描述：名字 + 当前卷用量"""
    __slots__ = ("name", "volume_usage", "_pods")

    def __init__(self, name: str, limits: Dict[str, int] | None = None):
        self.name = name
        self.volume_usage = VolumeUsage()
        for driver, value in (limits or {}).items():
            self.volume_usage.add_limit(driver, value)
        self._pods: Dict[PodKey, Pod] = {}

    @property
    def pods(self) -> list[Pod]:
        """返回当前节点上已记录的 Pod 对象列表（只读）。"""
        return list(self._pods.values())

    # —— 卷上限判定 —— #
    def can_fit(self, pod: Pod) -> VolumeLimitExceeded | None:
        return self.volume_usage.exceeds_limits(pod.volumes)

    def add_pod(self, pod: Pod, check: bool = True):
        if check:
            err = self.can_fit(pod)
            if err is not None:
                raise err
        self.volume_usage.add(pod.key, pod.volumes)
        self._pods[pod.key] = pod

    def rm_pod(self, pod: Pod):
        self.volume_usage.delete_pod(pod.key)
        self._pods.pop(pod.key, None)

    def clone(self) -> "Node":
        dup = Node(self.name)
        dup.volume_usage = self.volume_usage.copy()
        dup._pods = dict(self._pods)
        return dup

    def __repr__(self):
        return f"Node({self.name}, pods={len(self._pods)}, {self.volume_usage})"
