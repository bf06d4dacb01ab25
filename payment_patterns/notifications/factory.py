"""
Notifier factory.

Channels map to zero-argument makers; ``get`` builds a fresh notifier on
every call, so callers never share notifier state.
"""

from typing import Callable, Dict, List, Union

import structlog

from payment_patterns.core.exceptions import NotifierNotRegisteredError
from payment_patterns.notifications.notifiers import Channel, Notifier

logger = structlog.get_logger(__name__)

NotifierMaker = Callable[[], Notifier]


def _channel_key(channel: Union[Channel, str]) -> str:
    if isinstance(channel, Channel):
        return channel.value
    return channel


class NotifierFactory:
    def __init__(self) -> None:
        self._registry: Dict[str, NotifierMaker] = {}

    def register(self, channel: Union[Channel, str], maker: NotifierMaker) -> None:
        """Register (or replace) the maker for a channel."""
        key = _channel_key(channel)
        self._registry[key] = maker
        logger.debug("notifier_registered", channel=key)

    def get(self, channel: Union[Channel, str]) -> Notifier:
        """
        Build a notifier for ``channel``.

        Raises:
            NotifierNotRegisteredError: If nothing is registered for the channel
        """
        key = _channel_key(channel)
        maker = self._registry.get(key)
        if maker is None:
            raise NotifierNotRegisteredError(key)
        return maker()

    @property
    def channels(self) -> List[str]:
        return list(self._registry)
