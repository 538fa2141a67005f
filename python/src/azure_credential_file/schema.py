"""Credential data models using Pydantic."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class AzureCloud(StrEnum):
    """Azure cloud environments recognized by the CSI driver."""

    PUBLIC = "AzurePublicCloud"
    CHINA = "AzureChinaCloud"


class Credentials(BaseModel):
    """Credentials rendered into the Azure credential file.

    Field order is the key order of the rendered JSON document. Aliases are the
    key names the driver tests read.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    cloud: AzureCloud
    tenant_id: str = Field(alias="tenantId", min_length=1)
    subscription_id: str = Field(alias="subscriptionId", min_length=1)
    client_id: str = Field(alias="aadClientId", min_length=1)
    client_secret: str = Field(alias="aadClientSecret", min_length=1)
    resource_group: str = Field(alias="resourceGroup", min_length=1)
    location: str = Field(alias="location", min_length=1)


class BundleCreds(BaseModel):
    """Service principal record inside a bundle file.

    The storage account fields are shared with other consumers of the bundle
    format and are not used here.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    client_id: str = Field(alias="ClientID", min_length=1)
    client_secret: str = Field(alias="ClientSecret", min_length=1)
    tenant_id: str = Field(alias="TenantID", min_length=1)
    subscription_id: str = Field(alias="SubscriptionID", min_length=1)
    storage_account_name: str = Field(default="", alias="StorageAccountName")
    storage_account_key: str = Field(default="", alias="StorageAccountKey")


class BundleCredentials(BaseModel):
    """Top-level bundle document: a single ``Creds`` table."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    creds: BundleCreds = Field(alias="Creds")
