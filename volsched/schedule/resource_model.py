"""
resource_model.py
~~~~~~~~~~~~~~~~~
在内存中维护『节点 ←→ Pod』映射，用于放置模拟。
"""
from __future__ import annotations
from typing import Dict, List

from .errors import VolumeLimitExceeded
from .resource_types import Pod, Node


class ResourceModel:
    """
    保存 **单个调度方案** 的完整快照；
    支持克隆、放置 / 驱逐 Pod 等基本操作。
    """
    def __init__(self,
                 nodes: Dict[str, Node],
                 pod2node: Dict[str, str] | None = None):
        self.nodes: Dict[str, Node] = nodes
        self.pod2node: Dict[str, str] = pod2node or {}

    # —— 克隆 —— #
    def clone(self) -> "ResourceModel":
        nodes = {name: nd.clone() for name, nd in self.nodes.items()}
        return ResourceModel(nodes, dict(self.pod2node))

    # —— 查询辅助 —— #
    def pods_on_node(self, node_name: str) -> List[str]:
        return [p for p, n in self.pod2node.items() if n == node_name]

    def feasible_nodes(self, pod: Pod) -> Dict[str, VolumeLimitExceeded | None]:
        """逐节点检查卷上限：{node_name: None(可放) | 超限原因}"""
        return {name: nd.can_fit(pod) for name, nd in self.nodes.items()}

    # —— 原子操作 —— #
    def place(self, pod: Pod, node_name: str):
        """先检查再提交；超限时抛 VolumeLimitExceeded，状态不变"""
        target = self.nodes[node_name]
        err = target.can_fit(pod)
        if err is not None:
            raise err
        self.evict(pod)
        target.add_pod(pod, check=False)
        self.pod2node[pod.full_name] = node_name

    def evict(self, pod: Pod):
        node_name = self.pod2node.pop(pod.full_name, None)
        if node_name is not None and node_name in self.nodes:
            self.nodes[node_name].rm_pod(pod)
