"""
Source resolution.

The convert program can only read local files, so every source reference is
turned into a local path before any option is recorded:
- http(s) URLs are downloaded
- other stream URLs (ftp://, data sources behind urllib handlers) are copied
- local paths and file:// URIs are used as-is
"""

import hashlib
import os
import re
import shutil
import uuid
import urllib.error
import urllib.request
from pathlib import Path
from typing import Optional, Union
from urllib.parse import urlparse

import requests

from ..core.errors import ResourceUnavailable
from ..logger import get_logger
from .settings import Settings
from .temp_files import TempFileRegistry

logger = get_logger("source_loader")

HTTP_PATTERN = re.compile(r"^https?://", re.IGNORECASE)
STREAM_PATTERN = re.compile(r"^[a-z][a-z0-9+.\-]*://", re.IGNORECASE)

DOWNLOAD_PREFIX = "imagick_auto_download_"
COPY_PREFIX = "imagick-tmp-"


def get_file_extension(reference: str) -> str:
    """Lower-cased extension of a path or URL, without the dot."""
    path = urlparse(reference).path if STREAM_PATTERN.match(reference) else reference
    return os.path.splitext(path)[1].lstrip(".").lower()


def _temp_name(prefix: str, token: str, extension: str) -> str:
    return f"{prefix}{token}.{extension}" if extension else f"{prefix}{token}"


class SourceLoader:
    """Resolves source references into local file paths."""

    def __init__(self, registry: TempFileRegistry, settings: Optional[Settings] = None):
        self.registry = registry
        self.settings = settings or Settings()

    def resolve(self, reference: Union[str, os.PathLike]) -> str:
        """
        Return a local path for the given reference.

        Args:
            reference: Local path, http(s) URL or other stream URL

        Returns:
            Path readable through ordinary file access

        Raises:
            ResourceUnavailable: the download, copy or lookup failed
        """
        reference = os.fspath(reference)

        if HTTP_PATTERN.match(reference):
            return self._download(reference)

        if reference.lower().startswith("file://"):
            reference = urllib.request.url2pathname(urlparse(reference).path)
        elif STREAM_PATTERN.match(reference):
            return self._copy_stream(reference)

        if not os.path.isfile(reference):
            raise ResourceUnavailable(reference, "file does not exist")
        return reference

    def _download(self, url: str) -> str:
        """Fetch a remote image into the temp directory."""
        token = hashlib.md5(url.encode("utf-8")).hexdigest()
        target = Path(self.settings.get_temp_dir()) / _temp_name(
            DOWNLOAD_PREFIX, token, get_file_extension(url)
        )

        logger.debug("Downloading %s to %s", url, target)
        try:
            response = requests.get(url, timeout=self.settings.get_http_timeout())
            response.raise_for_status()
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(response.content)
        except (requests.RequestException, OSError) as e:
            if target.exists():
                target.unlink()
            raise ResourceUnavailable(url, str(e)) from e

        return self.registry.register(str(target))

    def _copy_stream(self, reference: str) -> str:
        """Copy a non-local stream into a uniquely named local file."""
        target = Path(self.settings.get_temp_dir()) / _temp_name(
            COPY_PREFIX, uuid.uuid4().hex, get_file_extension(reference)
        )

        logger.debug("Copying %s to %s", reference, target)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            with urllib.request.urlopen(reference) as src, open(target, "wb") as dst:
                shutil.copyfileobj(src, dst)
        except (urllib.error.URLError, ValueError, OSError) as e:
            if target.exists():
                target.unlink()
            raise ResourceUnavailable(reference, str(e)) from e

        return self.registry.register(str(target))
