import logging
from typing import Any, Callable, Optional

from google import genai

from utils.validators import ServiceUnavailableError


class SessionGuard:
    """
    Session Guard: builds the Gemini client from the credential and probes the
    service by listing models, so network and credential problems surface
    before any audio is read or uploaded.
    """

    def __init__(self, client_factory: Optional[Callable[..., Any]] = None):
        self.client_factory = client_factory or genai.Client
        self.logger = logging.getLogger(self.__class__.__name__)

    def execute(self, api_key: str):
        """
        Connect to the generation service

        Args:
            api_key: Google API key

        Returns:
            A client that answered the capability probe

        Raises:
            ServiceUnavailableError: client construction or the probe failed
        """
        try:
            client = self.client_factory(api_key=api_key)
            self._probe(client)
        except Exception as e:
            self.logger.exception(f"Google API probe failed: {e}")
            raise ServiceUnavailableError() from e

        self.logger.info("Google API available")
        return client

    def _probe(self, client):
        pager = client.models.list(config={"page_size": 1})
        # forces the first page request
        next(iter(pager), None)
