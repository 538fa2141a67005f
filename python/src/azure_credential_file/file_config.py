"""Bundle file credential loading."""

import logging
import tomllib
from pathlib import Path

from pydantic import ValidationError

from azure_credential_file.schema import BundleCreds, BundleCredentials
from azure_credential_file.utils import BundleParseError, BundleReadError

logger = logging.getLogger(__name__)

BUNDLE_ENV_VAR = "AZURE_CREDENTIALS"


def find_and_process_bundle_credentials(path: str | Path) -> BundleCreds:
    """Load the service principal record from a TOML bundle file.

    The bundle looks like::

        [Creds]
        ClientID = "..."
        ClientSecret = "..."
        TenantID = "..."
        SubscriptionID = "..."
        StorageAccountName = "..."
        StorageAccountKey = "..."

    Raises:
        BundleReadError: If the file cannot be read.
        BundleParseError: If the file is not valid TOML or lacks the ``Creds`` record.
    """
    logger.debug("Reading credentials file %s", path)
    try:
        content = Path(path).read_bytes()
    except (OSError, ValueError) as err:
        raise BundleReadError(path, err) from err

    try:
        data = tomllib.loads(content.decode("utf-8"))
        bundle = BundleCredentials.model_validate(data)
    except (UnicodeDecodeError, tomllib.TOMLDecodeError, ValidationError) as err:
        raise BundleParseError(path, err) from err

    return bundle.creds
