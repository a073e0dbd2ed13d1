# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


from abc import ABCMeta

from dashview_lib.batch.parsers.interface import ExtendedParserInterface
from dashview_lib.core.config import CFG
from dashview_lib.core.error import DVError
from dashview_lib.core.logger import get_logger

logger = get_logger(__name__)


class ParserMeta(ABCMeta):
    """
    Metaclass for native extended-data parsers.
    """

    # registry of native parsers keyed by adapter name
    _registry: dict[str, type[ExtendedParserInterface]] = {}

    def __str__(cls: type[ExtendedParserInterface]):
        """
        Get the string representation of the parser class.
        """
        return cls.adapterName()

    @classmethod
    def register(mcs, parser_cls: type[ExtendedParserInterface]):
        """
        Register a parser class in the metaclass registry.

        Args:
            parser_cls: Subclass of ExtendedParserInterface to register.
        """
        mcs._registry[parser_cls.adapterName()] = parser_cls

    @classmethod
    def fromAdapter(mcs, adapter: str) -> type[ExtendedParserInterface] | None:
        """
        Return the native parser registered for the given adapter.

        Returns:
            type[ExtendedParserInterface] | None: The parser class or None
            if the adapter has no native parser.
        """
        return mcs._registry.get(adapter)

    @classmethod
    def adapterOf(mcs, cluster: str) -> str:
        """
        Return the name of the scheduler adapter configured for a cluster.

        Raises:
            DVError: If the cluster is not configured.
        """
        try:
            return CFG.clusters.adapters[cluster]
        except KeyError as e:
            raise DVError(f"Unknown cluster '{cluster}'.") from e

    @classmethod
    def hasNativeParser(mcs, cluster: str) -> bool:
        """
        Check whether the adapter of the given cluster has a native parser.

        Raises:
            DVError: If the cluster is not configured.
        """
        available = mcs.fromAdapter(mcs.adapterOf(cluster)) is not None
        logger.debug(f"Native parser available for cluster '{cluster}': {available}.")
        return available


def native_parser(cls: type[ExtendedParserInterface]) -> type[ExtendedParserInterface]:
    """
    Class decorator registering a native parser in `ParserMeta`.
    """
    ParserMeta.register(cls)
    return cls
