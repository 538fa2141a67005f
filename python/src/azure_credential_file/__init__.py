"""Azure credential file for Azure File CSI driver tests."""

from azure_credential_file.cloud_region import CloudRegion, EnvVarNames, get_cloud_region
from azure_credential_file.credential_file import (
    CredentialFileManager,
    create_credential_file,
    delete_credential_file,
    resolve_credentials,
)
from azure_credential_file.env_config import EnvCredentials, find_and_process_env_credentials
from azure_credential_file.file_config import BUNDLE_ENV_VAR, find_and_process_bundle_credentials
from azure_credential_file.render import DEFAULT_CREDENTIAL_FILE_PATH, render_credentials
from azure_credential_file.schema import AzureCloud, BundleCreds, BundleCredentials, Credentials
from azure_credential_file.utils import (
    BundleParseError,
    BundleReadError,
    CredentialFileError,
    FileCreateError,
    FileDeleteError,
    MissingCredentialsError,
    TemplateError,
)

__all__ = [
    "BUNDLE_ENV_VAR",
    "DEFAULT_CREDENTIAL_FILE_PATH",
    "AzureCloud",
    "BundleCreds",
    "BundleCredentials",
    "BundleParseError",
    "BundleReadError",
    "CloudRegion",
    "CredentialFileError",
    "CredentialFileManager",
    "Credentials",
    "EnvCredentials",
    "EnvVarNames",
    "FileCreateError",
    "FileDeleteError",
    "MissingCredentialsError",
    "TemplateError",
    "create_credential_file",
    "delete_credential_file",
    "find_and_process_bundle_credentials",
    "find_and_process_env_credentials",
    "get_cloud_region",
    "render_credentials",
    "resolve_credentials",
]
