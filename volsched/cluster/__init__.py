from .ClusterMonitor import ClusterMonitor

__all__ = ["ClusterMonitor"]
