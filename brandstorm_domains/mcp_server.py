"""
MCP stdio server exposing the domain tools

Tools:
- suggest-domains: Multi-strategy suggestions with availability and insights
- quick-suggest: Standard-mode suggestions with a fixed result size
- check-domain: Availability of one domain or a list of up to 20
- deep-tld-explore: Batched exploration of the full TLD catalog

Usage:
    brandstorm-domains --stdio
"""
from contextlib import asynccontextmanager
import logging
import sys
from typing import Annotated, AsyncIterator, List, Optional

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError

from brandstorm_domains.api.schemas.response_schemas import ToolResponse
from brandstorm_domains.api.tools import DomainTools
from brandstorm_domains.config.constants import (
    DEFAULT_BATCH_SIZE,
    DEFAULT_MAX_BATCHES,
    DEFAULT_SUGGESTIONS,
)
from brandstorm_domains.config.logging_config import setup_logging
from brandstorm_domains.config.settings import settings
from brandstorm_domains.core.ai_manager import AIManager
from brandstorm_domains.services.domain_service import DomainService

logger = logging.getLogger(__name__)


def _text(response: ToolResponse) -> str:
    """Return tool text, raising so the client sees the error flag"""
    if response.is_error:
        raise ToolError(response.text)
    return response.text


def create_mcp_server(tools: Optional[DomainTools] = None) -> FastMCP:
    """
    Build the MCP server

    Args:
        tools: Tool surface to expose (built lazily from settings when omitted)
    """
    state = {"tools": tools}
    owns_service = tools is None

    @asynccontextmanager
    async def lifespan(server: FastMCP) -> AsyncIterator[None]:
        try:
            yield
        finally:
            if owns_service and state["tools"] is not None:
                logger.info("🛑 Shutting down...")
                await state["tools"].service.close()
                await AIManager.cleanup()

    mcp = FastMCP(
        name=settings.app_name,
        instructions=(
            "Suggests brandable domain names for a business description, checks "
            "registration availability and explores the full TLD catalog."
        ),
        lifespan=lifespan,
    )

    def get_tools() -> DomainTools:
        if state["tools"] is None:
            state["tools"] = DomainTools(DomainService(settings))
        return state["tools"]

    @mcp.tool(name="suggest-domains")
    async def suggest_domains(
        description: Annotated[str, "Detailed description of the business/project"],
        mode: Annotated[
            str,
            "standard (balanced), competitive (creative), budget (affordable), "
            "premium (top TLDs) or international (global)"
        ] = "standard",
        max_suggestions: Annotated[int, "Maximum suggestions (1-50)"] = DEFAULT_SUGGESTIONS,
    ) -> str:
        """Domain suggestions with scoring and categorized availability results."""
        return _text(await get_tools().suggest(description, mode, max_suggestions))

    @mcp.tool(name="quick-suggest")
    async def quick_suggest(
        description: Annotated[str, "Brief description of the business/project"],
    ) -> str:
        """Fast domain suggestions with basic availability checking."""
        return _text(await get_tools().quick_suggest(description))

    @mcp.tool(name="check-domain")
    async def check_domain(
        domain: Annotated[Optional[str], "Domain name to check (e.g., example.com)"] = None,
        domains: Annotated[Optional[List[str]], "Up to 20 domains to check"] = None,
    ) -> str:
        """Check whether a domain, or each domain of a list, is available."""
        return _text(await get_tools().check_availability(domain, domains))

    @mcp.tool(name="deep-tld-explore")
    async def deep_tld_explore(
        description: Annotated[str, "Description of the business/project"],
        keywords: Annotated[Optional[List[str]], "Keywords (extracted when omitted)"] = None,
        batch_size: Annotated[int, "TLDs per batch (10-500)"] = DEFAULT_BATCH_SIZE,
        max_batches: Annotated[int, "Requested number of batches (1-20)"] = DEFAULT_MAX_BATCHES,
        creativity_level: Annotated[str, "conservative, moderate or wild"] = "moderate",
        check_availability: Annotated[bool, "Check availability of the top standouts"] = False,
    ) -> str:
        """Explore every TLD in batches and return the standout combinations."""
        return _text(await get_tools().explore_deep(
            description,
            keywords=keywords,
            batch_size=batch_size,
            max_batches=max_batches,
            creativity_level=creativity_level,
            check_availability=check_availability,
        ))

    return mcp


def main() -> None:
    """Run the MCP server over stdio."""
    # stdout carries JSON-RPC
    setup_logging(stream=sys.stderr, enable_json=False)
    logger.info(f"🚀 Starting {settings.app_name} MCP server (stdio)")
    create_mcp_server().run()


if __name__ == "__main__":
    main()
