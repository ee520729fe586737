import logging

import urllib3
from kubernetes import client, config
from kubernetes.client.rest import ApiException

from ..schedule.constants import DEFAULT_KUBECONFIG, IS_DEFAULT_STORAGE_CLASS_ANNOTATION
urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)


class ClusterMonitor:
    """通过Kubernetes API读取卷相关对象（只读）"""
    def __init__(self, kubeconfig: str = DEFAULT_KUBECONFIG):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        try:
            config.load_incluster_config()
        except config.ConfigException:
            config.load_kube_config(kubeconfig)
            self.logger.info(f"在本地连接到远程集群 kubeconfig={kubeconfig}")

        self.core_v1 = client.CoreV1Api()
        self.storage_v1 = client.StorageV1Api()

    # —— 卷解析依赖的单对象查询，错误直接向上抛 —— #
    def get_pvc(self, namespace: str, name: str):
        return self.core_v1.read_namespaced_persistent_volume_claim(name=name, namespace=namespace)

    def get_pv(self, name: str):
        return self.core_v1.read_persistent_volume(name=name)

    def get_storage_class(self, name: str):
        return self.storage_v1.read_storage_class(name=name)

    def discover_default_storage_class_name(self) -> str:
        """
        返回带 is-default-class=true 注解的 StorageClass 名；
        有多个时取最新创建的那个，没有则返回空串。
        """
        defaults = [
            sc for sc in self.storage_v1.list_storage_class().items
            if (sc.metadata.annotations or {}).get(IS_DEFAULT_STORAGE_CLASS_ANNOTATION) == "true"
        ]
        if not defaults:
            return ""
        if len(defaults) > 1:
            self.logger.warning(f"发现多个默认 StorageClass: {[sc.metadata.name for sc in defaults]}，取最新的")
        newest = max(defaults, key=lambda sc: sc.metadata.creation_timestamp)
        return newest.metadata.name

    def get_csi_node_limits(self, node_name: str) -> dict[str, int]:
        """
        读取 CSINode 上各 driver 的可挂载卷数量：
          { driver_name: allocatable_count, ... }
        节点没有 CSINode 对象时返回空字典。
        """
        try:
            csi_node = self.storage_v1.read_csi_node(name=node_name)
        except ApiException as e:
            if e.status == 404:
                self.logger.debug(f"节点 {node_name} 没有 CSINode 对象")
                return {}
            raise
        limits: dict[str, int] = {}
        for d in csi_node.spec.drivers or []:
            if d.allocatable is not None and d.allocatable.count is not None:
                limits[d.name] = d.allocatable.count
        return limits

    # —— 快照用的列表查询 —— #
    def list_nodes(self):
        return self.core_v1.list_node().items

    def list_pods(self):
        return self.core_v1.list_pod_for_all_namespaces().items

    def list_pending_pods(self, namespace: str = "default"):
        return self.core_v1.list_namespaced_pod(
            namespace=namespace,
            field_selector="status.phase=Pending"
        ).items
