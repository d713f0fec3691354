"""
Part downloader.

Copies one part of a processed log request to a new file, byte for byte.
The content is opaque here; any reformatting belongs to
``metrika_logs.convert`` and is never applied implicitly.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import IO, TYPE_CHECKING

import httpx

from metrika_logs.api.config import LOG_PART_DOWNLOAD_PATH
from metrika_logs.exceptions import READ_RESPONSE_FAILED, WRITE_FILE_FAILED, InternalError
from metrika_logs.logging import get_logger
from metrika_logs.services.export._config import (
    DOWNLOAD_CHUNK_SIZE,
    PART_FILE_PREFIX,
    PART_FILE_SUFFIX,
)

if TYPE_CHECKING:
    from metrika_logs.transport import MetrikaTransport

logger = get_logger(__name__)


class PartDownloader:
    """Downloads single log request parts into a directory."""

    def __init__(
        self,
        transport: MetrikaTransport,
        counter_id: int,
        chunk_size: int = DOWNLOAD_CHUNK_SIZE,
    ) -> None:
        self._transport = transport
        self._counter_id = counter_id
        self._chunk_size = chunk_size

    async def download(
        self,
        request_id: int,
        part_number: int,
        dest_dir: Path | str,
    ) -> Path:
        """
        Download one part into ``dest_dir``.

        The file is named ``{counter}_{request}_{part}-<unique>.csv`` and is
        only created once the service has answered with a success status.
        If the transfer fails after that, the partial file stays on disk and
        the error is raised; no path is returned.

        Returns:
            Path of the written file.
        """
        dest = Path(dest_dir)
        try:
            dest.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise InternalError(WRITE_FILE_FAILED, e) from e

        url_path = LOG_PART_DOWNLOAD_PATH.format(
            counter_id=self._counter_id,
            request_id=request_id,
            part_number=part_number,
        )
        async with self._transport.stream("GET", url_path) as response:
            file_path, fileobj = self._create_file(dest, request_id, part_number)
            try:
                written = await self._copy(response, fileobj)
            except BaseException:
                _close_quietly(fileobj, file_path)
                raise
            try:
                fileobj.close()
            except OSError as e:
                raise InternalError(WRITE_FILE_FAILED, e) from e

        logger.debug(
            "part_downloaded",
            request_id=request_id,
            part_number=part_number,
            path=str(file_path),
            size=written,
        )
        return file_path

    def _create_file(self, dest: Path, request_id: int, part_number: int) -> tuple[Path, IO[bytes]]:
        prefix = PART_FILE_PREFIX.format(
            counter_id=self._counter_id,
            request_id=request_id,
            part_number=part_number,
        )
        try:
            fd, name = tempfile.mkstemp(prefix=prefix, suffix=PART_FILE_SUFFIX, dir=dest)
            return Path(name), os.fdopen(fd, "wb")
        except OSError as e:
            raise InternalError(WRITE_FILE_FAILED, e) from e

    async def _copy(self, response: httpx.Response, fileobj: IO[bytes]) -> int:
        written = 0
        try:
            async for chunk in response.aiter_bytes(self._chunk_size):
                try:
                    fileobj.write(chunk)
                except OSError as e:
                    raise InternalError(WRITE_FILE_FAILED, e) from e
                written += len(chunk)
        except httpx.HTTPError as e:
            raise InternalError(READ_RESPONSE_FAILED, e) from e
        return written


def _close_quietly(fileobj: IO[bytes], file_path: Path) -> None:
    """Close a part file after a failed transfer without masking the failure."""
    try:
        fileobj.close()
    except OSError as e:
        logger.warning("part_file_close_failed", path=str(file_path), error=str(e))
