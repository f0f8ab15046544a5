from types import ModuleType

from . import compute, gcloud

# Each backend module exposes check_dependencies, describe_instance,
# describe_machine_type and describe_disk with identical signatures.
_BACKENDS: dict[str, ModuleType] = {
    "api": compute,
    "gcloud": gcloud,
}


def get_backend(name: str) -> ModuleType:
    try:
        return _BACKENDS[name]
    except KeyError:
        raise ValueError(f"Unknown backend '{name}'") from None
