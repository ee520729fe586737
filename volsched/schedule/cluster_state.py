"""
cluster_state.py
~~~~~~~~~~~~~~~~
负责把 ClusterMonitor 提供的实时信息转换成 ResourceModel，
供放置模拟使用。模拟逻辑**只依赖 ResourceModel**，
不直接访问 K8s API。
"""
from __future__ import annotations
import logging
from typing import Dict

from .constants import TRACKED_POD_PHASES
from .resource_model import ResourceModel
from .resource_types import Pod, Node
from .volume_discovery import VolumeDiscovery

logger = logging.getLogger(__name__)


def to_pod(k8s_pod, discovery: VolumeDiscovery) -> Pod:
    """V1Pod → Pod（附带已解析的卷）。查询失败直接抛出。"""
    meta = k8s_pod.metadata
    return Pod(meta.name,
               meta.namespace,
               discovery.get_volumes(k8s_pod),
               meta.labels or {})


def _is_ready(k8s_node) -> bool:
    conds = {c.type: c.status for c in (k8s_node.status.conditions or [])}
    return conds.get("Ready") == "True"


# —— 公开主函数 —— #
def snapshot_cluster(monitor, discovery: VolumeDiscovery) -> ResourceModel:
    """
    采集 **所有 Ready 节点**（含 CSINode 卷上限）+ **已绑定节点的 Running / Pending Pod**，
    返回一个 ResourceModel。已存在的 Pod 直接记入用量，不做上限校验。
    """
    # 1. Nodes
    nodes: Dict[str, Node] = {}
    for n in monitor.list_nodes():
        name = n.metadata.name
        if not _is_ready(n):
            continue
        nodes[name] = Node(name, monitor.get_csi_node_limits(name))

    # 2. Pods
    pod2node: Dict[str, str] = {}
    for p in monitor.list_pods():
        if p.status.phase not in TRACKED_POD_PHASES:
            continue
        node_name = p.spec.node_name
        if node_name not in nodes:
            # 未绑定或节点不在快照里
            continue
        pod = to_pod(p, discovery)
        nodes[node_name].add_pod(pod, check=False)
        pod2node[pod.full_name] = node_name

    logger.info("snapshot: %d nodes, %d pods with tracked placement", len(nodes), len(pod2node))
    return ResourceModel(nodes, pod2node)
