"""Tests for cloud and env var name selection."""

from azure_credential_file.cloud_region import CloudRegion, EnvVarNames, get_cloud_region
from azure_credential_file.schema import AzureCloud


class TestGetCloudRegion:
    def test_public_cloud(self) -> None:
        result = get_cloud_region(False)
        assert result.cloud == AzureCloud.PUBLIC
        assert result.default_location == "eastus2"

    def test_china_cloud(self) -> None:
        result = get_cloud_region(True)
        assert result.cloud == AzureCloud.CHINA
        assert result.default_location == "chinaeast2"

    def test_defaults_to_public_cloud(self) -> None:
        assert get_cloud_region() == get_cloud_region(False)

    def test_public_env_names(self) -> None:
        names = get_cloud_region(False).env_names
        assert names == EnvVarNames(
            tenant_id="tenantId",
            subscription_id="subscriptionId",
            client_id="aadClientId",
            client_secret="aadClientSecret",
            resource_group="resourceGroup",
            location="location",
        )

    def test_china_env_names(self) -> None:
        names = get_cloud_region(True).env_names
        assert names.tenant_id == "tenantId_china"
        assert names.subscription_id == "subscriptionId_china"
        assert names.client_id == "aadClientId_china"
        assert names.client_secret == "aadClientSecret_china"
        assert names.resource_group == "resourceGroup_china"
        assert names.location == "location_china"

    def test_mandatory_names(self) -> None:
        names = get_cloud_region(False).env_names
        assert names.mandatory == ["tenantId", "subscriptionId", "aadClientId", "aadClientSecret"]

    def test_cloud_values_are_sdk_names(self) -> None:
        assert isinstance(get_cloud_region(), CloudRegion)
        assert str(AzureCloud.PUBLIC) == "AzurePublicCloud"
        assert str(AzureCloud.CHINA) == "AzureChinaCloud"
