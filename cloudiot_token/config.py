from typing import Mapping, NamedTuple, Optional

from .exceptions import MissingArgument

DEFAULT_CLOUD_REGION = "us-central1"
DEFAULT_ALGORITHM = "RS256"
PROJECT_ENV_VARS = ("GCLOUD_PROJECT", "GOOGLE_CLOUD_PROJECT")


def default_project_id(environ: Mapping[str, str]) -> Optional[str]:
    """
    Returns the project ID found in the environment, `GCLOUD_PROJECT` winning over
    `GOOGLE_CLOUD_PROJECT`. Empty values are ignored.
    """
    for name in PROJECT_ENV_VARS:
        value = environ.get(name)
        if value:
            return value
    return None


class AccessTokenConfig(NamedTuple):
    """Everything needed to mint a device JWT and exchange it for a GCP access token"""

    cloud_region: str
    project_id: str
    registry_id: str
    device_id: str
    scopes: str
    algorithm: str
    certificate_file: str

    @classmethod
    def from_args(cls, args) -> "AccessTokenConfig":
        config = cls(**{field: getattr(args, field) for field in cls._fields})
        config.validate()
        return config

    def validate(self) -> None:
        for field in self._fields:
            if not getattr(self, field):
                raise MissingArgument(field)
