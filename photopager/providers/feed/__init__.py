"""Photo-feed API clients.

``FiveHundredPxFeedClient`` talks to the 500px ``/v1/photos`` endpoint over
an injected ``httpx.AsyncClient``.  Any other feed can be supported by
implementing :class:`~photopager.interfaces.feed_client.IFeedClient`.
"""

from photopager.providers.feed.fivehundredpx_client import FiveHundredPxFeedClient

__all__ = ["FiveHundredPxFeedClient"]
