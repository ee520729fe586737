"""Shared fixtures: kubernetes model factories and an in-memory API double."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from kubernetes import client
from kubernetes.client.rest import ApiException


def make_pvc(namespace: str, name: str, storage_class: str | None = None,
             volume_name: str | None = None) -> client.V1PersistentVolumeClaim:
    return client.V1PersistentVolumeClaim(
        metadata=client.V1ObjectMeta(name=name, namespace=namespace),
        spec=client.V1PersistentVolumeClaimSpec(
            storage_class_name=storage_class,
            volume_name=volume_name,
        ),
    )


def make_csi_pv(name: str, driver: str) -> client.V1PersistentVolume:
    return client.V1PersistentVolume(
        metadata=client.V1ObjectMeta(name=name),
        spec=client.V1PersistentVolumeSpec(
            csi=client.V1CSIPersistentVolumeSource(driver=driver, volume_handle=f"handle-{name}"),
        ),
    )


def make_ebs_pv(name: str) -> client.V1PersistentVolume:
    return client.V1PersistentVolume(
        metadata=client.V1ObjectMeta(name=name),
        spec=client.V1PersistentVolumeSpec(
            aws_elastic_block_store=client.V1AWSElasticBlockStoreVolumeSource(volume_id="vol-0abc"),
        ),
    )


def make_nfs_pv(name: str) -> client.V1PersistentVolume:
    return client.V1PersistentVolume(
        metadata=client.V1ObjectMeta(name=name),
        spec=client.V1PersistentVolumeSpec(
            nfs=client.V1NFSVolumeSource(path="/export", server="10.0.0.2"),
        ),
    )


def make_storage_class(name: str, provisioner: str, default: bool = False,
                       created: datetime | None = None) -> client.V1StorageClass:
    annotations = {"storageclass.kubernetes.io/is-default-class": "true"} if default else None
    return client.V1StorageClass(
        metadata=client.V1ObjectMeta(
            name=name,
            annotations=annotations,
            creation_timestamp=created or datetime(2026, 1, 1, tzinfo=timezone.utc),
        ),
        provisioner=provisioner,
    )


def pvc_volume(name: str, claim_name: str) -> client.V1Volume:
    return client.V1Volume(
        name=name,
        persistent_volume_claim=client.V1PersistentVolumeClaimVolumeSource(claim_name=claim_name),
    )


def ephemeral_volume(name: str, storage_class: str | None = None,
                     volume_name: str | None = None) -> client.V1Volume:
    return client.V1Volume(
        name=name,
        ephemeral=client.V1EphemeralVolumeSource(
            volume_claim_template=client.V1PersistentVolumeClaimTemplate(
                spec=client.V1PersistentVolumeClaimSpec(
                    storage_class_name=storage_class,
                    volume_name=volume_name,
                ),
            ),
        ),
    )


def empty_dir_volume(name: str) -> client.V1Volume:
    return client.V1Volume(name=name, empty_dir=client.V1EmptyDirVolumeSource())


def make_pod(namespace: str, name: str, volumes: list[client.V1Volume] | None = None,
             phase: str = "Pending", node_name: str | None = None) -> client.V1Pod:
    return client.V1Pod(
        metadata=client.V1ObjectMeta(name=name, namespace=namespace),
        spec=client.V1PodSpec(containers=[], volumes=volumes, node_name=node_name),
        status=client.V1PodStatus(phase=phase),
    )


def make_node(name: str, ready: bool = True) -> client.V1Node:
    return client.V1Node(
        metadata=client.V1ObjectMeta(name=name),
        status=client.V1NodeStatus(conditions=[
            client.V1NodeCondition(type="Ready", status="True" if ready else "False"),
        ]),
    )


class FakeClusterApi:
    """In-memory stand-in for ClusterMonitor; missing objects raise a 404 ApiException."""

    def __init__(self):
        self.pvcs: dict[tuple[str, str], client.V1PersistentVolumeClaim] = {}
        self.pvs: dict[str, client.V1PersistentVolume] = {}
        self.storage_classes: dict[str, client.V1StorageClass] = {}
        self.default_storage_class = ""
        self.nodes: list[client.V1Node] = []
        self.pods: list[client.V1Pod] = []
        self.csi_limits: dict[str, dict[str, int]] = {}
        self.calls: list[tuple] = []

    def get_pvc(self, namespace, name):
        self.calls.append(("pvc", namespace, name))
        try:
            return self.pvcs[(namespace, name)]
        except KeyError:
            raise ApiException(status=404, reason="Not Found")

    def get_pv(self, name):
        self.calls.append(("pv", name))
        try:
            return self.pvs[name]
        except KeyError:
            raise ApiException(status=404, reason="Not Found")

    def get_storage_class(self, name):
        self.calls.append(("sc", name))
        try:
            return self.storage_classes[name]
        except KeyError:
            raise ApiException(status=404, reason="Not Found")

    def discover_default_storage_class_name(self):
        self.calls.append(("default-sc",))
        return self.default_storage_class

    def get_csi_node_limits(self, node_name):
        return dict(self.csi_limits.get(node_name, {}))

    def list_nodes(self):
        return list(self.nodes)

    def list_pods(self):
        return list(self.pods)

    def list_pending_pods(self, namespace="default"):
        return [p for p in self.pods
                if p.metadata.namespace == namespace and p.status.phase == "Pending"]


@pytest.fixture
def api() -> FakeClusterApi:
    return FakeClusterApi()
