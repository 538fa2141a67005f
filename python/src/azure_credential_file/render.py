"""Rendering, writing and removing the Azure credential file."""

import json
import logging
import os
import uuid
from pathlib import Path

from pydantic_core import PydanticSerializationError

from azure_credential_file.schema import Credentials
from azure_credential_file.utils import FileCreateError, FileDeleteError, TemplateError

logger = logging.getLogger(__name__)

DEFAULT_CREDENTIAL_FILE_PATH = "/tmp/azure.json"
_FILE_MODE = 0o600


def render_credentials(credentials: Credentials) -> str:
    """Serialize credentials into the credential file JSON document.

    Keys are emitted in field order: cloud, tenantId, subscriptionId,
    aadClientId, aadClientSecret, resourceGroup, location.
    """
    try:
        document = credentials.model_dump(by_alias=True, mode="json")
        return json.dumps(document, indent=4)
    except (PydanticSerializationError, TypeError, ValueError) as err:
        raise TemplateError(f"error rendering azure credential file: {err}") from err


def write_credential_file(credentials: Credentials, path: str | Path) -> Credentials:
    """Render credentials and write them to ``path``, replacing any existing file.

    The document is written to a sibling temporary file first and moved into
    place, so readers never see a half-written file.

    Raises:
        TemplateError: If the document cannot be rendered.
        FileCreateError: If the file cannot be written.
    """
    content = render_credentials(credentials)

    path = Path(path)
    tmp = path.with_name(f".{path.name}.tmp.{uuid.uuid4().hex[:8]}")
    created = False
    try:
        fd = os.open(tmp, os.O_WRONLY | os.O_CREAT | os.O_EXCL, _FILE_MODE)
        created = True
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        os.replace(tmp, path)
    except (OSError, ValueError) as err:
        if created:
            tmp.unlink(missing_ok=True)
        raise FileCreateError(path, err) from err

    logger.debug("Wrote azure credential file %s", path)
    return credentials


def remove_credential_file(path: str | Path) -> None:
    """Remove the credential file. A missing file is not an error.

    Raises:
        FileDeleteError: For any other removal failure.
    """
    try:
        Path(path).unlink()
    except FileNotFoundError:
        return
    except (OSError, ValueError) as err:
        raise FileDeleteError(path, err) from err

    logger.debug("Removed azure credential file %s", path)
