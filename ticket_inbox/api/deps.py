"""
API dependencies for dependency injection.
"""

from typing import Optional

from ticket_inbox.core.config import Settings, settings
from ticket_inbox.core.exceptions import ConfigurationMissing
from ticket_inbox.core.logging import get_logger
from ticket_inbox.database.session import Database
from ticket_inbox.jira.client import JiraClient
from ticket_inbox.repositories.base import SummaryCache
from ticket_inbox.repositories.summary_cache import SqlSummaryCache
from ticket_inbox.services.inbox_service import InboxAssembler
from ticket_inbox.services.summary_generator import SummaryGenerator

logger = get_logger(__name__)


class ServiceContainer:
    """
    Container for all application services.
    Builds each collaborator once, on first use, from settings.
    """

    def __init__(self, app_settings: Settings) -> None:
        self.settings = app_settings
        self._cache: Optional[SummaryCache] = None
        self._jira_client: Optional[JiraClient] = None
        self._summary_generator: Optional[SummaryGenerator] = None
        self._inbox_assembler: Optional[InboxAssembler] = None

    def require_inbox_config(self) -> None:
        """
        Fail fast when required configuration is missing.

        Raises:
            ConfigurationMissing: Naming every missing variable
        """
        missing = self.settings.missing_inbox_settings()
        if missing:
            raise ConfigurationMissing(missing)

    @property
    def cache(self) -> SummaryCache:
        """Get the summary cache."""
        if self._cache is None:
            database = Database(
                self.settings.database.url,
                echo=self.settings.database.echo,
            )
            self._cache = SqlSummaryCache(database, timeout=self.settings.database.timeout)
        return self._cache

    @property
    def jira_client(self) -> JiraClient:
        """Get the Jira client."""
        if self._jira_client is None:
            jira = self.settings.jira
            self._jira_client = JiraClient(
                base_url=jira.base_url,
                email=jira.email,
                api_token=jira.api_token,
                timeout=jira.timeout,
                max_results=jira.max_results,
            )
        return self._jira_client

    @property
    def summary_generator(self) -> SummaryGenerator:
        """Get the summary generator."""
        if self._summary_generator is None:
            llm = self.settings.anthropic
            self._summary_generator = SummaryGenerator(
                api_key=llm.api_key,
                model=llm.model,
                max_tokens=llm.max_tokens,
                timeout=llm.timeout,
            )
        return self._summary_generator

    @property
    def inbox_assembler(self) -> InboxAssembler:
        """Get the inbox assembler."""
        if self._inbox_assembler is None:
            self._inbox_assembler = InboxAssembler(
                ticket_source=self.jira_client,
                summarizer=self.summary_generator,
                cache=self.cache,
            )
        return self._inbox_assembler

    async def startup(self) -> None:
        """Create cache tables when a cache store is configured."""
        if isinstance(self.cache, SqlSummaryCache):
            await self.cache.database.init_models()

    async def shutdown(self) -> None:
        """Close every client that was created."""
        if self._jira_client is not None:
            await self._jira_client.close()
        if self._summary_generator is not None:
            await self._summary_generator.close()
        if self._cache is not None:
            await self._cache.close()
        logger.info("Service container closed")


# Process-wide container instance
container = ServiceContainer(settings)


# Dependency functions for FastAPI
def get_inbox_assembler() -> InboxAssembler:
    """Get the inbox assembler, checking configuration first."""
    container.require_inbox_config()
    return container.inbox_assembler


def get_cache() -> SummaryCache:
    """Get the summary cache instance."""
    return container.cache
