"""
调度相关异常
"""


class VolumeLimitExceeded(Exception):
    """某个 driver 的卷数量将超过节点上限。属于正常的调度结论，不是系统故障。"""

    def __init__(self, driver: str, count: int, limit: int):
        super().__init__(f"would exceed volume limit for {driver}, {count} > {limit}")
        self.driver = driver
        self.count = count
        self.limit = limit


class VolumeDiscoveryError(Exception):
    """发现 Pod 卷时依赖的查询失败"""
