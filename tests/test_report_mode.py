import argparse
import io
from datetime import datetime

import pytest
from rich.console import Console

from vminfo.errors import DescribeError
from vminfo.modes.report import build_report, report_filename, run_report

NOW = datetime(2024, 1, 31, 9, 30, 0)


@pytest.fixture
def backend(mocker, instance_json, machine_type_json):
    """A backend module stand-in returning canned REST data."""
    fake = mocker.Mock()
    fake.describe_instance.return_value = instance_json
    fake.describe_machine_type.return_value = machine_type_json

    def describe_disk(project_id, disk_name, scope):
        if disk_name == "shared-data":
            raise DescribeError(f"Unable to describe disk '{disk_name}'")
        return {"sizeGb": "50", "type": "zones/us-east1-b/diskTypes/pd-balanced"}

    fake.describe_disk.side_effect = describe_disk
    return fake


def test_report_filename():
    assert report_filename("vm-example", NOW) == "vm-example_20240131_info.txt"


def test_build_report(backend):
    report = build_report(backend, "my-project", "vm-example", "us-east1-b", NOW)

    assert report.run_date == "2024-01-31 09:30:00"
    assert report.machine_type.name == "e2-standard-4"
    assert report.operating_system == "debian-12-bookworm"
    assert report.boot_disk == "vm-example"
    assert report.data_disks == ["shared-data"]

    backend.describe_machine_type.assert_called_once_with(
        "my-project", "us-east1-b", "e2-standard-4"
    )

    boot = report.disks[0]
    assert boot.scope.kind == "zonal"
    assert boot.details.size_gb == "50"
    assert boot.details.disk_type == "pd-balanced"
    assert "vm-example-20240131" in boot.commands.snapshot


def test_failed_disk_describe_keeps_entry(backend):
    report = build_report(backend, "my-project", "vm-example", "us-east1-b", NOW)

    # The regional disk could not be described but is still reported
    shared = report.disks[1]
    assert shared.ref.name == "shared-data"
    assert shared.scope.kind == "regional"
    assert shared.details.describe_failed is True
    assert shared.details.size_gb == "unknown"
    assert shared.details.disk_type == "unknown"
    assert "--size=unknownGB" in shared.commands.disk_from_image


def test_instance_failure_propagates(backend):
    backend.describe_instance.side_effect = DescribeError("instance not found")

    with pytest.raises(DescribeError):
        build_report(backend, "my-project", "vm-example", "us-east1-b", NOW)


def _args(tmp_path, **overrides):
    values = {
        "project_id": "my-project",
        "instance_name": "vm-example",
        "zone": "us-east1-b",
        "backend": "api",
        "output_dir": str(tmp_path),
        "stdout": False,
    }
    values.update(overrides)
    return argparse.Namespace(**values)


def test_run_report_writes_file(mocker, backend, tmp_path):
    mocker.patch("vminfo.modes.report.get_backend", return_value=backend)
    console = Console(file=io.StringIO())

    path = run_report(_args(tmp_path), console, now=NOW)

    assert path == tmp_path / "vm-example_20240131_info.txt"
    text = path.read_text()
    assert "VM Report: vm-example" in text
    assert "! Warning! Unable to describe disk 'shared-data'." in text
    assert "VM information saved to" in console.file.getvalue()
    backend.check_dependencies.assert_called_once()


def test_run_report_stdout(mocker, backend, tmp_path, capsys):
    mocker.patch("vminfo.modes.report.get_backend", return_value=backend)

    path = run_report(
        _args(tmp_path, stdout=True), Console(file=io.StringIO()), now=NOW
    )

    assert path is None
    assert "END OF REPORT" in capsys.readouterr().out
    assert list(tmp_path.iterdir()) == []


def test_local_ssd_without_source_keeps_report(backend, instance_json):
    instance_json["disks"].append({"type": "SCRATCH", "deviceName": "local-ssd-0"})

    report = build_report(backend, "my-project", "vm-example", "us-east1-b", NOW)

    assert len(report.disks) == 3
    ssd = report.disks[2]
    assert ssd.ref.name == "local-ssd-0"
    assert ssd.scope is None
    assert ssd.commands is None
    assert ssd.details.describe_failed is True
    assert ssd.details.size_gb == "unknown"
    assert ssd.details.disk_type == "unknown"
    assert report.data_disks == ["shared-data", "local-ssd-0"]

    # Never described: there is nothing to look up
    described = [c.args[1] for c in backend.describe_disk.call_args_list]
    assert "local-ssd-0" not in described
