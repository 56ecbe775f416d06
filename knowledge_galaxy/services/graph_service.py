"""Knowledge graph ingestion service.

Resolves topics to validated graphs (template lookup, then the generic
generator) and turns raw text from a generative model into a validated graph.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, List, Optional

from ..knowledge_graph.generator import GenericGraphGenerator
from ..knowledge_graph.parser import parse_graph_response
from ..knowledge_graph.templates import DEFAULT_TEMPLATE_LIBRARY, TemplateLibrary
from ..knowledge_graph.validator import validate_graph
from ..llm.prompts import KNOWLEDGE_GRAPH_SYSTEM_PROMPT, build_topic_prompt
from ..models.graph import GraphData
from ..utils.constants import DEFAULT_FETCH_DELAY_SECONDS
from ..utils.exceptions import (
    ConfigurationError,
    GraphIntegrityError,
    GraphValidationError,
    ParseError,
)
from ..utils.topic_keys import normalize_topic

if TYPE_CHECKING:
    from ..llm.remote_clients import AnthropicGraphClient

logger = logging.getLogger(__name__)


class KnowledgeGraphService:
    """Single entry point for obtaining validated knowledge graphs.

    Attributes:
        templates: Registry of pre-built graphs keyed by normalized topic.
        generator: Fallback generator for topics without a template.
        model_client: Optional generative model client.
        fetch_delay_seconds: Artificial latency awaited by ``fetch_graph``.
        strict_categories: Reject node categories outside the enumerated set.
    """

    def __init__(
        self,
        templates: TemplateLibrary = DEFAULT_TEMPLATE_LIBRARY,
        generator: Optional[GenericGraphGenerator] = None,
        model_client: Optional[AnthropicGraphClient] = None,
        fetch_delay_seconds: float = DEFAULT_FETCH_DELAY_SECONDS,
        strict_categories: bool = False,
    ):
        self.templates = templates
        self.generator = generator or GenericGraphGenerator()
        self.model_client = model_client
        self.fetch_delay_seconds = fetch_delay_seconds
        self.strict_categories = strict_categories

    async def fetch_graph(self, topic: str) -> GraphData:
        """Resolve a topic to a validated graph.

        Args:
            topic: Arbitrary user-supplied topic text.

        Returns:
            The template graph for the normalized topic, or a generic graph.

        Raises:
            GraphIntegrityError: If a template or the generator produced an
                invalid graph. This is a defect in trusted code.
        """
        if self.fetch_delay_seconds > 0:
            await asyncio.sleep(self.fetch_delay_seconds)

        key = normalize_topic(topic)
        graph = self.templates.lookup(key)
        if graph is not None:
            source = f"template '{key}'"
            logger.info("Serving %s", source)
        else:
            source = "generic generator"
            logger.info("No template for '%s', using generic generator", key)
            graph = self.generator.generate(topic)

        try:
            validate_graph(graph, strict_categories=self.strict_categories)
        except GraphValidationError as e:
            logger.exception("Internal graph source produced invalid data (%s)", source)
            raise GraphIntegrityError(
                f"Graph from {source} failed validation: {e.message}", cause=e
            ) from e

        return graph

    def parse_external_response(self, raw_text: str) -> GraphData:
        """Parse raw model output into a validated graph.

        No fallback happens here: callers decide whether to retry or fall
        back to ``fetch_graph``.

        Raises:
            ParseError: If the text is not valid JSON.
            GraphValidationError: If the JSON violates a graph invariant.
        """
        try:
            return parse_graph_response(raw_text, strict_categories=self.strict_categories)
        except (ParseError, GraphValidationError) as e:
            logger.warning("Rejected external graph response: %s", e)
            raise

    async def generate_from_model(self, topic: str) -> GraphData:
        """Ask the configured model for a graph about ``topic`` and validate it.

        Raises:
            ConfigurationError: If no model client is configured.
            LLMError: If the model call fails (LLMTimeoutError on timeout).
            ParseError: If the reply is not valid JSON.
            GraphValidationError: If the reply violates a graph invariant.
        """
        if self.model_client is None:
            raise ConfigurationError("No generative model client is configured")

        raw_text = await self.model_client.generate(
            build_topic_prompt(topic), system=KNOWLEDGE_GRAPH_SYSTEM_PROMPT
        )
        logger.debug("Model returned %d characters for '%s'", len(raw_text), topic)
        return self.parse_external_response(raw_text)

    def template_keys(self) -> List[str]:
        return self.templates.keys()


def build_graph_service(settings=None) -> KnowledgeGraphService:
    """Build a KnowledgeGraphService from configuration.

    Args:
        settings: Config object, defaults to the application config.
    """
    if settings is None:
        from ..api.config import config as settings

    model_client = None
    if settings.ANTHROPIC_API_KEY:
        from ..llm.remote_clients import AnthropicGraphClient

        model_client = AnthropicGraphClient(
            api_key=settings.ANTHROPIC_API_KEY,
            endpoint=settings.GRAPH_MODEL_ENDPOINT,
            model=settings.GRAPH_MODEL,
            max_tokens=settings.GRAPH_MAX_TOKENS,
            temperature=settings.GRAPH_TEMPERATURE,
            timeout=settings.GRAPH_TIMEOUT_SECONDS,
        )
        logger.info(
            "Generative model client enabled (model: %s, key: %s)",
            settings.GRAPH_MODEL,
            settings.mask_sensitive(settings.ANTHROPIC_API_KEY),
        )

    return KnowledgeGraphService(
        templates=DEFAULT_TEMPLATE_LIBRARY,
        generator=GenericGraphGenerator(seed=settings.GRAPH_GENERATOR_SEED),
        model_client=model_client,
        fetch_delay_seconds=settings.GRAPH_FETCH_DELAY_SECONDS,
        strict_categories=settings.GRAPH_STRICT_CATEGORIES,
    )
