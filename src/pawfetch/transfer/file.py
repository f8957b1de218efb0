"""Local file transport."""

from __future__ import annotations

from pawfetch.common import create_logger
from pawfetch.sources.models import LocalFileRequest

logger = create_logger("transfer.file")


class FileTransport:
    def transfer(self, request: LocalFileRequest) -> bytes | None:
        try:
            payload = request.path.read_bytes()
        except OSError as exc:
            logger.warning("Could not read file", path=str(request.path), error=str(exc))
            return None

        logger.debug("File read", path=str(request.path), size=len(payload))
        return payload or None
