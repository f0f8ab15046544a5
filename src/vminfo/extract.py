"""
Field extraction from REST-shaped compute resources.

Both fetch backends hand back plain dictionaries keyed the way the Compute
Engine REST API names them (``machineType``, ``networkIP``, ``sizeGb``...),
so everything in here is independent of how the data was fetched.
"""

from typing import Any

from .core import NONE_LABEL, UNKNOWN
from .schemas.compute import DiskDetails, DiskRef, MachineTypeInfo, NetworkInfo


def basename(url: str | None) -> str:
    """Last path segment of a resource URL (e.g., .../machineTypes/n1-standard-1)."""
    if not url:
        return UNKNOWN
    return url.rstrip("/").split("/")[-1]


def extract_machine_type_name(instance: dict[str, Any]) -> str:
    return basename(instance.get("machineType"))


def extract_machine_type(machine_type: dict[str, Any]) -> MachineTypeInfo:
    return MachineTypeInfo(
        name=machine_type.get("name") or UNKNOWN,
        guest_cpus=int(machine_type.get("guestCpus", 0)),
        memory_mb=int(machine_type.get("memoryMb", 0)),
    )


def extract_disks(instance: dict[str, Any]) -> list[DiskRef]:
    disks = []
    for d in instance.get("disks") or []:
        source = d.get("source", "")
        # Local SSDs have no source; fall back to the device name
        name = basename(source) if source else d.get("deviceName") or UNKNOWN
        disks.append(
            DiskRef(
                name=name,
                source=source,
                boot=bool(d.get("boot", False)),
                licenses=list(d.get("licenses") or []),
            )
        )
    return disks


def extract_operating_system(instance: dict[str, Any]) -> str:
    """
    The OS is inferred from the last license attached to the boot disk,
    e.g. .../licenses/debian-12-bookworm -> debian-12-bookworm.
    """
    licenses: list[str] = []
    for disk in extract_disks(instance):
        if disk.boot:
            licenses.extend(disk.licenses)
    if not licenses:
        return UNKNOWN
    return basename(licenses[-1])


def extract_network(instance: dict[str, Any]) -> NetworkInfo:
    nics = instance.get("networkInterfaces") or []
    if not nics:
        return NetworkInfo(network=UNKNOWN, subnetwork=UNKNOWN, internal_ip=UNKNOWN)

    nic = nics[0]
    external_ip = NONE_LABEL
    access_configs = nic.get("accessConfigs") or []
    if access_configs and access_configs[0].get("natIP"):
        external_ip = access_configs[0]["natIP"]

    return NetworkInfo(
        network=basename(nic.get("network")),
        subnetwork=basename(nic.get("subnetwork")),
        internal_ip=nic.get("networkIP") or UNKNOWN,
        external_ip=external_ip,
    )


def extract_service_account(instance: dict[str, Any]) -> str:
    accounts = instance.get("serviceAccounts") or []
    if accounts and accounts[0].get("email"):
        return str(accounts[0]["email"])
    return NONE_LABEL


def extract_tags(instance: dict[str, Any]) -> str:
    items = (instance.get("tags") or {}).get("items") or []
    return ",".join(items) if items else NONE_LABEL


def extract_disk_details(disk: dict[str, Any]) -> DiskDetails:
    # sizeGb is an int64 and arrives as a string in REST JSON
    size = disk.get("sizeGb")
    return DiskDetails(
        size_gb=str(size) if size is not None else UNKNOWN,
        disk_type=basename(disk.get("type")),
    )
