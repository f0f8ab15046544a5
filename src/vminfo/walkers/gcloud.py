import json
import shutil
import subprocess
from typing import Any

from ..core import GCLOUD_INSTALL_HINT, GCLOUD_PACKAGES
from ..errors import DescribeError, MissingDependencyError
from ..logger import logger
from ..schemas.compute import DiskScope


def _install_with(manager: str, package: str) -> None:
    """Best-effort install via the system package manager. Never raises."""
    logger.warning(f"Installing '{package}' with {manager}...")
    steps = []
    if manager == "apt-get":
        steps.append(["sudo", manager, "update"])
    steps.append(["sudo", manager, "install", "-y", package])

    for step in steps:
        res = subprocess.run(step, capture_output=True, text=True)
        if res.returncode != 0:
            logger.debug(f"'{' '.join(step)}' failed: {res.stderr.strip()}")
            return


def check_dependencies() -> None:
    """
    Ensures the gcloud binary is available, trying apt-get or yum first.
    Raises MissingDependencyError with install instructions otherwise.
    """
    if shutil.which("gcloud"):
        return

    for manager, package in GCLOUD_PACKAGES.items():
        if shutil.which(manager):
            _install_with(manager, package)
            break

    if not shutil.which("gcloud"):
        raise MissingDependencyError(GCLOUD_INSTALL_HINT)


def _run_gcloud(args: list[str]) -> dict[str, Any]:
    cmd = ["gcloud", "compute", *args, "--format=json"]
    logger.debug(f"Running: {' '.join(cmd)}")

    res = subprocess.run(cmd, capture_output=True, text=True)
    if res.returncode != 0:
        stderr = res.stderr.strip()
        err = stderr.splitlines()[-1] if stderr else "Unknown error"
        raise DescribeError(f"{' '.join(cmd[:4])} failed: {err}")

    try:
        return json.loads(res.stdout)  # type: ignore[no-any-return]
    except json.JSONDecodeError as e:
        raise DescribeError(f"Malformed gcloud output for {' '.join(cmd[:4])}") from e


def describe_instance(project_id: str, zone: str, instance_name: str) -> dict[str, Any]:
    return _run_gcloud(
        [
            "instances",
            "describe",
            instance_name,
            f"--project={project_id}",
            f"--zone={zone}",
        ]
    )


def describe_machine_type(
    project_id: str, zone: str, machine_type: str
) -> dict[str, Any]:
    return _run_gcloud(
        [
            "machine-types",
            "describe",
            machine_type,
            f"--project={project_id}",
            f"--zone={zone}",
        ]
    )


def describe_disk(project_id: str, disk_name: str, scope: DiskScope) -> dict[str, Any]:
    return _run_gcloud(
        [
            "disks",
            "describe",
            disk_name,
            f"--project={project_id}",
            scope.scope_flag,
        ]
    )
