from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.console import Console

from ..application.feed import AtomFeed
from ..config import AtomFeedConfig
from ..domain.services.timestamps import utc_now
from .io.atom_xml import XmlTreeSerializer
from .logging.console_logger import ConsoleLogger
from .logging.null_logger import NullLogger

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ..application.ports.services import LoggerPort, XmlSerializerPort
    from ..domain.entities.inputs import FeedInput
    from ..domain.services.timestamps import Clock


class DependencyContainer:
    pass

    def __init__(
        self,
        verbose: int = 0,
        console: Console | None = None,
        use_null_logger: bool = False,
        config: AtomFeedConfig | None = None,
        logger: LoggerPort | None = None,
    ) -> None:
        super().__init__()
        self.verbose = verbose
        self.console = console or Console(stderr=True)
        self.use_null_logger = use_null_logger
        self.config = config or AtomFeedConfig()
        self._logger_instance: LoggerPort | None = logger
        self._serializer_instance: XmlSerializerPort | None = None

    def create_logger(self) -> LoggerPort:
        if self._logger_instance is None:
            if self.use_null_logger:
                self._logger_instance = NullLogger()
            else:
                self._logger_instance = ConsoleLogger(
                    console=self.console, verbosity=self.verbose
                )
        return self._logger_instance

    def create_serializer(self) -> XmlSerializerPort:
        if self._serializer_instance is None:
            self._serializer_instance = XmlTreeSerializer()
        return self._serializer_instance

    def create_feed(
        self, data: FeedInput | Mapping[str, Any], *, clock: Clock = utc_now
    ) -> AtomFeed:
        return AtomFeed(
            data,
            serializer=self.create_serializer(),
            logger=self.create_logger(),
            default_generator=self.config.default_generator,
            clock=clock,
        )


def create_feed(
    data: FeedInput | Mapping[str, Any],
    *,
    config: AtomFeedConfig | None = None,
    logger: LoggerPort | None = None,
    clock: Clock = utc_now,
) -> AtomFeed:
    """Build an :class:`AtomFeed` with the default serializer.

    Library callers get a silent logger unless they pass one.
    """
    container = DependencyContainer(
        use_null_logger=True, config=config, logger=logger
    )
    return container.create_feed(data, clock=clock)
