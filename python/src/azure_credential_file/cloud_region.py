"""Cloud and env var name selection for the public and China Azure clouds."""

from dataclasses import dataclass

from azure_credential_file.schema import AzureCloud

DEFAULT_PUBLIC_CLOUD_LOCATION = "eastus2"
DEFAULT_CHINA_CLOUD_LOCATION = "chinaeast2"

CHINA_ENV_SUFFIX = "_china"


@dataclass(frozen=True)
class EnvVarNames:
    """Names of the env vars holding each credential field."""

    tenant_id: str
    subscription_id: str
    client_id: str
    client_secret: str
    resource_group: str
    location: str

    @classmethod
    def with_suffix(cls, suffix: str = "") -> "EnvVarNames":
        return cls(
            tenant_id=f"tenantId{suffix}",
            subscription_id=f"subscriptionId{suffix}",
            client_id=f"aadClientId{suffix}",
            client_secret=f"aadClientSecret{suffix}",
            resource_group=f"resourceGroup{suffix}",
            location=f"location{suffix}",
        )

    @property
    def mandatory(self) -> list[str]:
        """The four names that must all be set for the direct path."""
        return [self.tenant_id, self.subscription_id, self.client_id, self.client_secret]


@dataclass(frozen=True)
class CloudRegion:
    """Result of cloud selection."""

    cloud: AzureCloud
    default_location: str
    env_names: EnvVarNames


def get_cloud_region(alternate_region: bool = False) -> CloudRegion:
    """Select the cloud, default location and env var names.

    Args:
        alternate_region: Target Azure China Cloud instead of Azure Public Cloud.
    """
    if alternate_region:
        return CloudRegion(
            cloud=AzureCloud.CHINA,
            default_location=DEFAULT_CHINA_CLOUD_LOCATION,
            env_names=EnvVarNames.with_suffix(CHINA_ENV_SUFFIX),
        )

    return CloudRegion(
        cloud=AzureCloud.PUBLIC,
        default_location=DEFAULT_PUBLIC_CLOUD_LOCATION,
        env_names=EnvVarNames.with_suffix(),
    )
