"""
volume_discovery.py
~~~~~~~~~~~~~~~~~~~
把 Pod 声明的卷转换成 Volumes（driver → 卷标识）。

依赖一个只读的 API 对象（通常是 ClusterMonitor），只用到：
  get_pvc(namespace, name) / get_pv(name) / get_storage_class(name)
  discover_default_storage_class_name()

两类失败严格区分：
  • API 查询失败（对象不存在、API 不可用）→ 异常向上抛，整个 Pod 的解析作废
  • driver 识别不出来 → 不是错误，该卷不参与上限统计
"""
from __future__ import annotations
import logging

from .constants import AWS_EBS_DRIVER_NAME
from .csi_translation import CSITranslator
from .errors import VolumeDiscoveryError
from .volumes import Volumes


class VolumeDiscovery:
    def __init__(self, api, translator: CSITranslator | None = None):
        self.api = api
        self.translator = translator or CSITranslator()
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def get_volumes(self, pod) -> Volumes:
        """
        pod 为 kubernetes V1Pod。PVC 卷的标识是 <namespace>/<claimName>，
        通用临时卷的标识是 <namespace>/<podName>-<volumeName>（与生成的 PVC 同名）。
        """
        ns = pod.metadata.namespace
        pod_name = pod.metadata.name
        pod_vols = Volumes()
        try:
            default_sc = self.api.discover_default_storage_class_name()
        except Exception as e:
            raise VolumeDiscoveryError(f"discovering default storage class, {e}") from e

        for volume in pod.spec.volumes or []:
            if volume.persistent_volume_claim is not None:
                claim_name = volume.persistent_volume_claim.claim_name
                pvc = self.api.get_pvc(ns, claim_name)
                pvc_id = f"{ns}/{claim_name}"
                sc_name = pvc.spec.storage_class_name
                volume_name = pvc.spec.volume_name
            elif volume.ephemeral is not None:
                tmpl_spec = volume.ephemeral.volume_claim_template.spec
                pvc_id = f"{ns}/{pod_name}-{volume.name}"
                sc_name = tmpl_spec.storage_class_name
                volume_name = tmpl_spec.volume_name
            else:
                # emptyDir / configMap / hostPath ... 不占挂载配额
                continue

            if not sc_name:
                sc_name = default_sc
            driver = self.resolve_driver(volume_name, sc_name)
            if driver:
                pod_vols.add(driver, pvc_id)
            else:
                self.logger.debug(f"[{ns}/{pod_name}] 卷 {volume.name} 未识别出 CSI driver，跳过 "
                                  f"(pv={volume_name!r}, storageClass={sc_name!r})")
        return pod_vols

    def resolve_driver(self, volume_name: str | None, storage_class_name: str | None) -> str:
        """
        按以下顺序解析 driver 名：
          1. 已绑定 PV：spec.csi.driver，或 in-tree 的 AWS EBS
          2. StorageClass 的 provisioner（in-tree 名翻译为 CSI 名）
        都解析不出时返回空串。
        """
        if volume_name:
            driver = self._driver_from_volume(volume_name)
            if driver:
                return driver
        if storage_class_name:
            driver = self._driver_from_storage_class(storage_class_name)
            if driver:
                return driver
        return ""

    def _driver_from_volume(self, volume_name: str) -> str:
        pv = self.api.get_pv(volume_name)
        spec = pv.spec
        if spec is None:
            return ""
        if spec.csi is not None:
            return spec.csi.driver
        if spec.aws_elastic_block_store is not None:
            return AWS_EBS_DRIVER_NAME
        return ""

    def _driver_from_storage_class(self, storage_class_name: str) -> str:
        sc = self.api.get_storage_class(storage_class_name)
        driver, _ = self.translator.translate(sc.provisioner or "")
        return driver
