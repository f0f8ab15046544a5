import json
from typing import Any

from google.api_core.exceptions import GoogleAPIError

from ..clients import (
    get_compute_instances_client,
    get_disks_client,
    get_machine_types_client,
    get_region_disks_client,
)
from ..errors import DescribeError
from ..logger import logger
from ..schemas.compute import DiskScope


def _to_dict(message: Any) -> dict[str, Any]:
    """
    Converts a compute_v1 message into its REST JSON shape (camelCase keys),
    matching what `gcloud ... --format=json` prints.
    """
    return json.loads(type(message).to_json(message))  # type: ignore[no-any-return]


def describe_instance(project_id: str, zone: str, instance_name: str) -> dict[str, Any]:
    logger.debug(f"Describing instance {instance_name} in {project_id}/{zone}")
    client = get_compute_instances_client()
    instance = client.get(project=project_id, zone=zone, instance=instance_name)
    return _to_dict(instance)


def describe_machine_type(
    project_id: str, zone: str, machine_type: str
) -> dict[str, Any]:
    logger.debug(f"Describing machine type {machine_type} in {zone}")
    client = get_machine_types_client()
    mt = client.get(project=project_id, zone=zone, machine_type=machine_type)
    return _to_dict(mt)


def describe_disk(project_id: str, disk_name: str, scope: DiskScope) -> dict[str, Any]:
    """
    Describes a zonal or regional disk. API failures are re-raised as
    DescribeError so the caller can degrade that one disk to 'unknown'.
    """
    logger.debug(f"Describing disk {disk_name} ({scope.scope_flag})")
    try:
        if scope.is_regional:
            disk = get_region_disks_client().get(
                project=project_id, region=scope.location, disk=disk_name
            )
        else:
            disk = get_disks_client().get(
                project=project_id, zone=scope.location, disk=disk_name
            )
    except GoogleAPIError as e:
        raise DescribeError(f"Unable to describe disk '{disk_name}': {e}") from e
    return _to_dict(disk)


def check_dependencies() -> None:
    """The client library backend needs nothing beyond its Python packages."""
