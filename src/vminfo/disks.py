from .errors import DiskClassificationError
from .schemas.compute import DiskScope


def _segment_after(source: str, marker: str) -> str | None:
    """
    Returns the path segment following `marker`.
    e.g. ("projects/p/zones/us-east1-b/disks/d", "zones") -> "us-east1-b"
    """
    parts = source.split("/")
    for i, part in enumerate(parts[:-1]):
        if part == marker and parts[i + 1]:
            return parts[i + 1]
    return None


def zone_to_region(zone: str) -> str:
    """Strips the trailing zone suffix: us-east1-b -> us-east1."""
    region, sep, _suffix = zone.rpartition("-")
    return region if sep else zone


def classify_disk(source: str) -> DiskScope:
    """
    Decides whether a disk is regional or zonal from its resource URI.
    Regional disks keep their snapshots in the same region; zonal disks
    store them in the region that contains the zone.
    """
    region = _segment_after(source, "regions")
    if region:
        return DiskScope(kind="regional", location=region, storage_location=region)

    zone = _segment_after(source, "zones")
    if zone:
        return DiskScope(
            kind="zonal", location=zone, storage_location=zone_to_region(zone)
        )

    raise DiskClassificationError(
        f"Cannot determine zone or region from disk source '{source}'"
    )
