from decimal import ROUND_DOWN, Decimal
from typing import Literal

from pydantic import BaseModel, Field

from ..core import NONE_LABEL, UNKNOWN


class MachineTypeInfo(BaseModel):
    name: str = Field(description="Cleaned machine type (e.g., n2-standard-4)")
    guest_cpus: int
    memory_mb: int

    @property
    def memory_gb(self) -> str:
        """Memory in GB, truncated (not rounded) to two decimals."""
        gb = Decimal(self.memory_mb) / Decimal(1024)
        return str(gb.quantize(Decimal("0.01"), rounding=ROUND_DOWN))


class NetworkInfo(BaseModel):
    network: str
    subnetwork: str
    internal_ip: str
    external_ip: str = NONE_LABEL


class DiskRef(BaseModel):
    name: str
    source: str = Field(description="Full resource URI of the attached disk")
    boot: bool = False
    licenses: list[str] = Field(default_factory=list)

    @property
    def label(self) -> str:
        return "Boot Disk" if self.boot else "Attached Disk"


class DiskScope(BaseModel):
    kind: Literal["zonal", "regional"]
    location: str = Field(description="Zone for zonal disks, region for regional")
    storage_location: str

    @property
    def is_regional(self) -> bool:
        return self.kind == "regional"

    @property
    def scope_flag(self) -> str:
        """Flag used by describe / disks create (e.g., --zone=us-east1-b)."""
        if self.is_regional:
            return f"--region={self.location}"
        return f"--zone={self.location}"

    @property
    def snapshot_flag(self) -> str:
        if self.is_regional:
            return f"--source-disk-region={self.location}"
        return f"--source-disk-zone={self.location}"

    @property
    def description(self) -> str:
        if self.is_regional:
            return f"Regional (region = {self.location})"
        return f"Zonal (zone = {self.location})"


class DiskDetails(BaseModel):
    size_gb: str = UNKNOWN
    disk_type: str = UNKNOWN
    describe_failed: bool = False


class BackupCommands(BaseModel):
    snapshot: str
    image_from_snapshot: str
    disk_from_image: str
    disk_from_snapshot: str


class DiskEntry(BaseModel):
    ref: DiskRef
    scope: DiskScope | None = None
    details: DiskDetails
    commands: BackupCommands | None = None


class VMReport(BaseModel):
    project_id: str
    instance_name: str
    zone: str
    run_date: str
    machine_type: MachineTypeInfo
    operating_system: str
    network: NetworkInfo
    service_account: str
    tags: str
    disks: list[DiskEntry] = Field(default_factory=list)

    @property
    def boot_disk(self) -> str | None:
        return next((d.ref.name for d in self.disks if d.ref.boot), None)

    @property
    def data_disks(self) -> list[str]:
        return [d.ref.name for d in self.disks if not d.ref.boot]
