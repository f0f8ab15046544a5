# Date stamp used in backup artefact names and the report file name
# e.g. 20240131 -> my-disk-20240131, my-vm_20240131_info.txt
DATE_STAMP_FORMAT = "%Y%m%d"

# Timestamp printed in the report header
RUN_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

REPORT_FILE_SUFFIX = "_info.txt"

# Placeholder for fields the API did not return (or could not be fetched)
UNKNOWN = "unknown"

# Placeholder for optional fields that are legitimately absent
NONE_LABEL = "None"

BACKENDS = ["api", "gcloud"]

# Package names tried when the gcloud binary is missing
GCLOUD_PACKAGES = {
    "apt-get": "google-cloud-cli",
    "yum": "google-cloud-cli",
}

GCLOUD_INSTALL_HINT = (
    "Please install the Google Cloud CLI manually: "
    "https://cloud.google.com/sdk/docs/install"
)
