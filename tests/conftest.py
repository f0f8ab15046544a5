import pytest

ZONAL_SOURCE = (
    "https://www.googleapis.com/compute/v1/projects/my-project"
    "/zones/us-east1-b/disks/vm-example"
)
REGIONAL_SOURCE = (
    "https://www.googleapis.com/compute/v1/projects/my-project"
    "/regions/us-east1/disks/shared-data"
)


@pytest.fixture
def instance_json():
    """REST-shaped instance, as returned by either backend."""
    return {
        "name": "vm-example",
        "id": "1234567890",
        "machineType": (
            "https://www.googleapis.com/compute/v1/projects/my-project"
            "/zones/us-east1-b/machineTypes/e2-standard-4"
        ),
        "disks": [
            {
                "boot": True,
                "source": ZONAL_SOURCE,
                "licenses": [
                    "https://www.googleapis.com/compute/v1/projects/debian-cloud"
                    "/global/licenses/debian-12-bookworm"
                ],
            },
            {"source": REGIONAL_SOURCE},
        ],
        "networkInterfaces": [
            {
                "network": "https://www.googleapis.com/compute/v1/projects/"
                "my-project/global/networks/prod-vpc",
                "subnetwork": "https://www.googleapis.com/compute/v1/projects/"
                "my-project/regions/us-east1/subnetworks/prod-subnet",
                "networkIP": "10.0.0.2",
                "accessConfigs": [{"natIP": "34.1.2.3"}],
            }
        ],
        "serviceAccounts": [{"email": "vm-sa@my-project.iam.gserviceaccount.com"}],
        "tags": {"items": ["http-server", "https-server"]},
    }


@pytest.fixture
def machine_type_json():
    return {"name": "e2-standard-4", "guestCpus": 4, "memoryMb": 16384}


@pytest.fixture
def zonal_source():
    return ZONAL_SOURCE


@pytest.fixture
def regional_source():
    return REGIONAL_SOURCE
