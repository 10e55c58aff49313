from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..config import CourierConfig
from ..domain.entities.outcome import NotFound
from ..domain.services.document_checks import is_recent, is_supported_format
from .models import DispatchRequest, DispatchResult, SkipReason

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import datetime

    from ..domain.entities.files import Certificate, RawFile
    from .ports.services import (
        ClockPort,
        LoggerPort,
        RecognizerPort,
        SenderPort,
        SignerPort,
    )


@dataclass(slots=True)
class FileDispatchDependencies:
    recognizer: RecognizerPort
    signer: SignerPort
    sender: SenderPort
    logger: LoggerPort
    clock: ClockPort
    config: CourierConfig = field(default_factory=CourierConfig)


class FileDispatchUseCase:
    """Recognize, validate, sign and send a batch of files.

    Every file is handled on its own: a failure at any stage marks that file
    as skipped and the batch moves on. Collaborators report failure through
    ``NotFound`` or ``False``; exceptions they raise are not caught here.
    """

    def __init__(self, dependencies: FileDispatchDependencies) -> None:
        super().__init__()
        self.logger = dependencies.logger
        self._recognizer = dependencies.recognizer
        self._signer = dependencies.signer
        self._sender = dependencies.sender
        self._clock = dependencies.clock
        self._config = dependencies.config

    def send_files(
        self, files: Sequence[RawFile], certificate: Certificate
    ) -> DispatchResult:
        return self.execute(DispatchRequest(files=files, certificate=certificate))

    def execute(self, request: DispatchRequest) -> DispatchResult:
        """Dispatch every file in ``request``.

        The clock is read once per call, so all files in a batch are checked
        for recency against the same moment.
        """
        self.logger.log_dispatch_start(len(request.files))
        now = self._clock.now()
        result = DispatchResult()
        for file in request.files:
            reason = self._try_send_file(file, request.certificate, now)
            if reason is None:
                result.sent_files.append(file)
                self.logger.log_file_sent(file.name)
            else:
                result.skipped_files.append(file)
                self.logger.log_file_skipped(file.name, reason)
        self.logger.log_dispatch_complete(result)
        self.logger.log_final_stats()
        return result

    def _try_send_file(
        self, file: RawFile, certificate: Certificate, now: datetime
    ) -> SkipReason | None:
        recognized = self._recognizer.try_recognize(file)
        if isinstance(recognized, NotFound):
            return SkipReason.NOT_RECOGNIZED
        document = recognized.value
        if not is_supported_format(document, self._config.supported_formats):
            self.logger.debug(
                f"{file.name}: format {document.format_version!r} not in {self._config.supported_formats}"
            )
            return SkipReason.UNSUPPORTED_FORMAT
        if not is_recent(document, now, self._config.max_age_months):
            self.logger.debug(
                f"{file.name}: created {document.created_at.isoformat()}, checked at {now.isoformat()}"
            )
            return SkipReason.OUTDATED
        signed_content = self._signer.sign(document.content, certificate)
        if not self._sender.try_send(signed_content):
            return SkipReason.SEND_FAILED
        return None
