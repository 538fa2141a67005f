"""Environment variable credential loading."""

import logging
import os
import uuid
from collections.abc import Mapping
from dataclasses import dataclass

from azure_credential_file.cloud_region import EnvVarNames

logger = logging.getLogger(__name__)

RESOURCE_GROUP_PREFIX = "azurefile-csi-driver-test-"


@dataclass(frozen=True)
class EnvCredentials:
    """Raw credential values read from env vars. Unset values are empty strings."""

    tenant_id: str = ""
    subscription_id: str = ""
    client_id: str = ""
    client_secret: str = ""
    resource_group: str = ""
    location: str = ""

    @property
    def complete(self) -> bool:
        """True when all four mandatory fields are non-empty."""
        return all((self.tenant_id, self.subscription_id, self.client_id, self.client_secret))


def find_and_process_env_credentials(
    env_names: EnvVarNames,
    env: Mapping[str, str] | None = None,
) -> EnvCredentials:
    """Read the six credential fields from environment variables.

    Args:
        env_names: Names of the env vars to read, from ``get_cloud_region``.
        env: Environment variable dict. If None, uses os.environ.
    """
    if env is None:
        env = dict(os.environ)

    return EnvCredentials(
        tenant_id=env.get(env_names.tenant_id, ""),
        subscription_id=env.get(env_names.subscription_id, ""),
        client_id=env.get(env_names.client_id, ""),
        client_secret=env.get(env_names.client_secret, ""),
        resource_group=env.get(env_names.resource_group, ""),
        location=env.get(env_names.location, ""),
    )


def generate_resource_group() -> str:
    """Generate a resource group name unique to this invocation."""
    return RESOURCE_GROUP_PREFIX + str(uuid.uuid4())


def apply_defaults(values: EnvCredentials, default_location: str) -> tuple[str, str]:
    """Return (resource_group, location), filling in defaults for empty values."""
    resource_group = values.resource_group
    if not resource_group:
        resource_group = generate_resource_group()
        logger.debug("No resource group set, using generated %s", resource_group)

    location = values.location or default_location

    return resource_group, location
