from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console

from ..application.file_dispatch_use_case import (
    FileDispatchDependencies,
    FileDispatchUseCase,
)
from ..config import CourierConfig
from .caching.lookup_cache import LookupCache
from .clocks import SystemClock
from .logging.console_logger import ConsoleLogger
from .logging.null_logger import NullLogger

if TYPE_CHECKING:
    from ..application.ports.repositories import LookupServicePort
    from ..application.ports.services import (
        ClockPort,
        LoggerPort,
        RecognizerPort,
        SenderPort,
        SignerPort,
    )


class DependencyContainer:
    pass

    def __init__(
        self,
        config: CourierConfig | None = None,
        console: Console | None = None,
        use_null_logger: bool = False,
        clock: ClockPort | None = None,
    ) -> None:
        super().__init__()
        self.config = config or CourierConfig()
        self.console = console or Console()
        self.use_null_logger = use_null_logger
        self._logger_instance: LoggerPort | None = None
        self._clock_instance: ClockPort | None = clock

    @property
    def verbose(self) -> int:
        return self.config.verbosity

    def create_logger(self) -> LoggerPort:
        if self._logger_instance is None:
            if self.use_null_logger:
                self._logger_instance = NullLogger()
            else:
                self._logger_instance = ConsoleLogger(
                    console=self.console, verbosity=self.verbose
                )
        return self._logger_instance

    def create_clock(self) -> ClockPort:
        if self._clock_instance is None:
            self._clock_instance = SystemClock()
        return self._clock_instance

    def create_file_dispatcher(
        self,
        recognizer: RecognizerPort,
        signer: SignerPort,
        sender: SenderPort,
    ) -> FileDispatchUseCase:
        return FileDispatchUseCase(
            FileDispatchDependencies(
                recognizer=recognizer,
                signer=signer,
                sender=sender,
                logger=self.create_logger(),
                clock=self.create_clock(),
                config=self.config,
            )
        )

    def create_lookup_cache(self, service: LookupServicePort) -> LookupCache:
        return LookupCache(service, logger=self.create_logger())

    def override_logger(self, logger: LoggerPort) -> None:
        self._logger_instance = logger

    def override_clock(self, clock: ClockPort) -> None:
        self._clock_instance = clock


def create_default_container(
    config: CourierConfig | None = None, *, use_null_logger: bool = False
) -> DependencyContainer:
    return DependencyContainer(config=config, use_null_logger=use_null_logger)
