"""
只读演练：对指定命名空间下的 Pending Pod，逐节点检查卷挂载上限，
输出每个 Pod 可以放到哪些节点。不会绑定任何 Pod。
"""
import logging, argparse, os, time

from kubernetes.client.rest import ApiException

from .cluster.ClusterMonitor import ClusterMonitor
from .schedule.cluster_state import snapshot_cluster, to_pod
from .schedule.constants import DEFAULT_KUBECONFIG
from .schedule.errors import VolumeDiscoveryError
from .schedule.volume_discovery import VolumeDiscovery


def _setup_logging(to_file: bool, level: int):
    fmt = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"
    if to_file:
        os.makedirs("logs", exist_ok=True)
        log_file = time.strftime("logs/%Y%m%d-%H%M%S.log")
        logging.basicConfig(filename=log_file, level=level, encoding="utf-8", format=fmt)
    else:
        logging.basicConfig(level=level, format=fmt)


def check_pending(monitor, discovery: VolumeDiscovery, namespace: str) -> dict[str, list[str]]:
    """返回 {pod_full_name: [可放置的节点名]}；卷解析失败的 Pod 不出现在结果里"""
    plan = snapshot_cluster(monitor, discovery)
    out: dict[str, list[str]] = {}
    for p in monitor.list_pending_pods(namespace):
        if p.spec.node_name:
            continue
        try:
            pod = to_pod(p, discovery)
        except (ApiException, VolumeDiscoveryError) as e:
            logging.error(f"解析 Pod {p.metadata.namespace}/{p.metadata.name} 的卷失败: {e}")
            continue
        fits = []
        for node_name, err in plan.feasible_nodes(pod).items():
            if err is None:
                fits.append(node_name)
            else:
                logging.info(f"{pod.full_name} ✗ {node_name}: {err}")
        logging.info(f"{pod.full_name} → {fits or 'no node'}")
        out[pod.full_name] = fits
    return out


def main():
    # 入口参数
    parser = argparse.ArgumentParser(description="K8s volume limit dry-run")
    parser.add_argument("--kubeconfig", type=str, default=DEFAULT_KUBECONFIG, help="集群外运行时的 kubeconfig 路径")
    parser.add_argument("--namespace", type=str, default="default", help="待检查的 Pending Pod 所在命名空间")
    parser.add_argument("--log", action="store_true", help="日志写入 logs/ 目录下的文件")
    parser.add_argument("--debug", action="store_true", help="输出 DEBUG 日志（包括被跳过的卷）")
    args = parser.parse_args()

    _setup_logging(args.log, logging.DEBUG if args.debug else logging.INFO)
    logging.info(f"Starting volume limit check, namespace={args.namespace}")

    monitor = ClusterMonitor(args.kubeconfig)
    discovery = VolumeDiscovery(monitor)
    check_pending(monitor, discovery, args.namespace)


if __name__ == "__main__":
    main()
