"""
volsched
~~~~~~~~
调度模拟中的存储卷挂载上限判定：
  • cluster  —— 通过 Kubernetes API 读取 PVC / PV / StorageClass / CSINode
  • schedule —— 卷集合、节点卷用量、集群快照
"""
