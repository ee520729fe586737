from .csi_translation import CSITranslator
from .errors import VolumeDiscoveryError, VolumeLimitExceeded
from .resource_model import ResourceModel
from .resource_types import Node, Pod
from .volume_discovery import VolumeDiscovery
from .volume_usage import PodKey, VolumeUsage
from .volumes import Volumes

__all__ = [
    "CSITranslator",
    "Node",
    "Pod",
    "PodKey",
    "ResourceModel",
    "VolumeDiscovery",
    "VolumeDiscoveryError",
    "VolumeLimitExceeded",
    "VolumeUsage",
    "Volumes",
]
