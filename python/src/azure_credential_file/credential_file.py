"""Credential resolution and the credential file entry points."""

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import ValidationError

from azure_credential_file.cloud_region import get_cloud_region
from azure_credential_file.env_config import apply_defaults, find_and_process_env_credentials
from azure_credential_file.file_config import BUNDLE_ENV_VAR, find_and_process_bundle_credentials
from azure_credential_file.render import DEFAULT_CREDENTIAL_FILE_PATH, remove_credential_file, write_credential_file
from azure_credential_file.schema import AzureCloud, Credentials
from azure_credential_file.utils import MissingCredentialsError, TemplateError

logger = logging.getLogger(__name__)


def _build_credentials(**fields: str) -> Credentials:
    """Build credentials, wrapping values the model rejects (e.g. undecodable env bytes)."""
    try:
        return Credentials(**fields)
    except ValidationError as err:
        invalid = ", ".join(".".join(str(part) for part in error["loc"]) for error in err.errors())
        raise TemplateError(f"error building azure credentials, invalid fields: {invalid}") from err


def resolve_credentials(
    alternate_region: bool = False,
    *,
    env: Mapping[str, str] | None = None,
) -> Credentials:
    """Resolve credentials from env vars or a bundle file.

    Resolution order (first match wins):
    1. The four mandatory env vars (tenantId, subscriptionId, aadClientId,
       aadClientSecret, or their ``_china`` variants) are all non-empty.
    2. AZURE_CREDENTIALS is set: read the bundle file it points to.
    3. Otherwise raise MissingCredentialsError.

    Values from the two sources are never mixed. Resource group and location
    defaults apply to both branches. The bundle branch always renders
    AzurePublicCloud, even when ``alternate_region`` is set: bundle files are
    only issued for the public cloud. Location still defaults per
    ``alternate_region``.

    Args:
        alternate_region: Target Azure China Cloud instead of Azure Public Cloud.
        env: Environment variable dict. If None, uses os.environ.
    """
    if env is None:
        env = dict(os.environ)

    region = get_cloud_region(alternate_region)
    values = find_and_process_env_credentials(region.env_names, env=env)
    resource_group, location = apply_defaults(values, region.default_location)

    if values.complete:
        logger.debug("Using credentials from %s env vars", region.cloud)
        return _build_credentials(
            cloud=region.cloud,
            tenant_id=values.tenant_id,
            subscription_id=values.subscription_id,
            client_id=values.client_id,
            client_secret=values.client_secret,
            resource_group=resource_group,
            location=location,
        )

    if BUNDLE_ENV_VAR in env:
        logger.info("%s is set, converting it to an azure credential file", BUNDLE_ENV_VAR)
        creds = find_and_process_bundle_credentials(env[BUNDLE_ENV_VAR])
        return _build_credentials(
            cloud=AzureCloud.PUBLIC,
            tenant_id=creds.tenant_id,
            subscription_id=creds.subscription_id,
            client_id=creds.client_id,
            client_secret=creds.client_secret,
            resource_group=resource_group,
            location=location,
        )

    raise MissingCredentialsError(region.env_names.mandatory, BUNDLE_ENV_VAR)


def create_credential_file(
    alternate_region: bool = False,
    *,
    env: Mapping[str, str] | None = None,
    path: str | Path = DEFAULT_CREDENTIAL_FILE_PATH,
) -> Credentials:
    """Resolve credentials and write them to the credential file.

    Overwrites any existing file at ``path``. Not safe to run concurrently
    against the same path.
    """
    credentials = resolve_credentials(alternate_region, env=env)
    return write_credential_file(credentials, path)


def delete_credential_file(path: str | Path = DEFAULT_CREDENTIAL_FILE_PATH) -> None:
    """Delete the credential file. A missing file is not an error."""
    remove_credential_file(path)


class CredentialFileManager:
    """Creates and deletes one credential file with fixed settings.

    Settings are captured at construction; the environment is read on each
    ``create()``. Usable as a context manager that creates the file on entry
    and deletes it on exit.
    """

    def __init__(
        self,
        *,
        alternate_region: bool = False,
        env: Mapping[str, str] | None = None,
        path: str | Path = DEFAULT_CREDENTIAL_FILE_PATH,
    ) -> None:
        self._alternate_region = alternate_region
        self._env = env
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def create(self) -> Credentials:
        """Resolve credentials and write the credential file."""
        return create_credential_file(self._alternate_region, env=self._env, path=self._path)

    def delete(self) -> None:
        """Delete the credential file."""
        delete_credential_file(self._path)

    def __enter__(self) -> Credentials:
        return self.create()

    def __exit__(self, *args: object) -> None:
        self.delete()
