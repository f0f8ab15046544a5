from __future__ import annotations

from functools import lru_cache
from typing import Any

from google.cloud import compute_v1

# Shared Client Registry (Lazy-loaded and cached)


@lru_cache(maxsize=1)
def get_compute_instances_client() -> Any:
    return compute_v1.InstancesClient()


@lru_cache(maxsize=1)
def get_machine_types_client() -> Any:
    return compute_v1.MachineTypesClient()


@lru_cache(maxsize=1)
def get_disks_client() -> Any:
    return compute_v1.DisksClient()


@lru_cache(maxsize=1)
def get_region_disks_client() -> Any:
    return compute_v1.RegionDisksClient()
