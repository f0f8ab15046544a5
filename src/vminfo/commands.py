from .schemas.compute import BackupCommands, DiskScope

CONTINUATION = " \\\n"


def _join(lines: list[str]) -> str:
    return CONTINUATION.join(lines)


def backup_name(disk_name: str, date_stamp: str) -> str:
    return f"{disk_name}-{date_stamp}"


def synthesize_commands(
    project_id: str,
    disk_name: str,
    scope: DiskScope,
    size_gb: str,
    disk_type: str,
    date_stamp: str,
) -> BackupCommands:
    """
    Builds the four suggested gcloud commands for backing up / restoring a disk.
    Nothing is executed; the output depends only on the arguments.
    """
    snap = backup_name(disk_name, date_stamp)

    snapshot = _join(
        [
            f"gcloud compute snapshots create {snap}",
            f"    --project={project_id} {scope.snapshot_flag}",
            f"    --source-disk={disk_name}",
            f"    --storage-location={scope.storage_location}",
        ]
    )
    image = _join(
        [
            f"gcloud compute images create {snap}",
            f"    --project={project_id}",
            f"    --source-snapshot={snap}",
        ]
    )
    disk_from_image = _join(
        [
            f"gcloud compute disks create {snap}",
            f"    --project={project_id} {scope.scope_flag}",
            f"    --image={snap}",
            f"    --size={size_gb}GB",
            f"    --type={disk_type}",
        ]
    )
    disk_from_snapshot = _join(
        [
            f"gcloud compute disks create {snap}-from-snapshot",
            f"    --project={project_id} {scope.scope_flag}",
            f"    --source-snapshot={snap}",
            f"    --size={size_gb}GB",
            f"    --type={disk_type}",
        ]
    )

    return BackupCommands(
        snapshot=snapshot,
        image_from_snapshot=image,
        disk_from_image=disk_from_image,
        disk_from_snapshot=disk_from_snapshot,
    )
