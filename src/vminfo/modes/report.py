import argparse
from datetime import datetime
from pathlib import Path
from types import ModuleType

from rich.console import Console

from ..commands import synthesize_commands
from ..core import DATE_STAMP_FORMAT, REPORT_FILE_SUFFIX, RUN_DATE_FORMAT
from ..disks import classify_disk
from ..errors import DescribeError, DiskClassificationError
from ..extract import (
    extract_disk_details,
    extract_disks,
    extract_machine_type,
    extract_machine_type_name,
    extract_network,
    extract_operating_system,
    extract_service_account,
    extract_tags,
)
from ..logger import logger
from ..reporter import render_report
from ..schemas.compute import DiskDetails, DiskEntry, VMReport
from ..walkers import get_backend


def report_filename(instance_name: str, now: datetime) -> str:
    return f"{instance_name}_{now.strftime(DATE_STAMP_FORMAT)}{REPORT_FILE_SUFFIX}"


def build_report(
    backend: ModuleType,
    project_id: str,
    instance_name: str,
    zone: str,
    now: datetime,
) -> VMReport:
    """
    Fetches instance, machine type and disk metadata and assembles the report.
    Per-disk failures degrade that disk to "unknown"; anything else propagates.
    """
    date_stamp = now.strftime(DATE_STAMP_FORMAT)

    # 1. Instance
    instance = backend.describe_instance(project_id, zone, instance_name)

    # 2. Machine Type
    mt_name = extract_machine_type_name(instance)
    machine_type = extract_machine_type(
        backend.describe_machine_type(project_id, zone, mt_name)
    )

    # 3. Disks
    entries = []
    for ref in extract_disks(instance):
        # Local SSDs (SCRATCH) have no source path to classify or describe
        try:
            scope = classify_disk(ref.source)
        except DiskClassificationError as e:
            logger.warning(f"Disk '{ref.name}': {e}")
            entries.append(
                DiskEntry(ref=ref, details=DiskDetails(describe_failed=True))
            )
            continue

        try:
            details = extract_disk_details(
                backend.describe_disk(project_id, ref.name, scope)
            )
        except DescribeError as e:
            logger.warning(str(e))
            details = DiskDetails(describe_failed=True)

        entries.append(
            DiskEntry(
                ref=ref,
                scope=scope,
                details=details,
                commands=synthesize_commands(
                    project_id,
                    ref.name,
                    scope,
                    details.size_gb,
                    details.disk_type,
                    date_stamp,
                ),
            )
        )

    return VMReport(
        project_id=project_id,
        instance_name=instance_name,
        zone=zone,
        run_date=now.strftime(RUN_DATE_FORMAT),
        machine_type=machine_type,
        operating_system=extract_operating_system(instance),
        network=extract_network(instance),
        service_account=extract_service_account(instance),
        tags=extract_tags(instance),
        disks=entries,
    )


def run_report(
    args: argparse.Namespace, console: Console, now: datetime | None = None
) -> Path | None:
    """Runs one report. Returns the written path, or None with --stdout."""
    now = now or datetime.now()
    backend = get_backend(args.backend)
    backend.check_dependencies()

    with console.status(f"Gathering details for [bold]{args.instance_name}[/bold]..."):
        report = build_report(
            backend, args.project_id, args.instance_name, args.zone, now
        )
    text = render_report(report)

    if args.stdout:
        # Plain print: the report must not be reflowed or markup-parsed
        print(text, end="")
        return None

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / report_filename(args.instance_name, now)
    output_path.write_text(text)

    console.print(f"[bold green]VM information saved to:[/bold green] {output_path}")
    return output_path
