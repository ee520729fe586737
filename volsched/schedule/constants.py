"""
卷调度常量与全局参数
"""
# kubeconfig 位置（集群外运行时使用）
DEFAULT_KUBECONFIG: str = "./config/config"

# 默认 StorageClass 的注解
IS_DEFAULT_STORAGE_CLASS_ANNOTATION: str = "storageclass.kubernetes.io/is-default-class"

# in-tree 插件中被特殊对待的云盘
AWS_EBS_DRIVER_NAME: str = "ebs.csi.aws.com"

# in-tree 插件名 → CSI driver 名
IN_TREE_TO_CSI: dict[str, str] = {
    "kubernetes.io/aws-ebs": AWS_EBS_DRIVER_NAME,
    "kubernetes.io/gce-pd": "pd.csi.storage.gke.io",
    "kubernetes.io/azure-disk": "disk.csi.azure.com",
    "kubernetes.io/azure-file": "file.csi.azure.com",
    "kubernetes.io/cinder": "cinder.csi.openstack.org",
    "kubernetes.io/vsphere-volume": "csi.vsphere.vmware.com",
    "kubernetes.io/portworx-volume": "pxd.portworx.com",
    "kubernetes.io/rbd": "rbd.csi.ceph.com",
}

# 参与卷统计的 Pod 阶段
TRACKED_POD_PHASES = ("Running", "Pending")
