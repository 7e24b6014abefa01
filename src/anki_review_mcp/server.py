"""MCP server instance and main entry point."""

import asyncio
from typing import Any

from mcp.server import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError
from mcp.types import INVALID_REQUEST, ErrorData, Resource, ResourceTemplate, TextContent, Tool
from pydantic import AnyUrl

from .client import AnkiClient
from .config import Settings, get_settings
from .exceptions import InvalidRequestError
from .logging import configure_logging, get_logger
from .resources import ResourceHandler
from .retriever import CardRetriever
from .tools import ToolHandler

SERVER_NAME = "anki-server"

logger = get_logger(component="server")


def create_server(client: AnkiClient | None = None, settings: Settings | None = None) -> Server:
    """Build the MCP server and register resource and tool handlers.

    Args:
        client: AnkiConnect client; built from settings when not given
        settings: Application settings; defaults to the environment

    Returns:
        Configured MCP server, not yet running
    """
    settings = settings or get_settings()
    if client is None:
        client = AnkiClient(
            settings.anki_connect_url,
            settings.anki_connect_version,
            settings.anki_connect_timeout,
        )

    retriever = CardRetriever(client)
    resource_handler = ResourceHandler(retriever)
    tool_handler = ToolHandler(
        client,
        retriever,
        deck_name=settings.default_deck,
        model_name=settings.default_model,
    )

    server = Server(SERVER_NAME)

    @server.list_resources()
    async def list_resources() -> list[Resource]:
        return resource_handler.list_resources()

    @server.list_resource_templates()
    async def list_resource_templates() -> list[ResourceTemplate]:
        return resource_handler.list_resource_templates()

    @server.read_resource()
    async def read_resource(uri: AnyUrl) -> list[ReadResourceContents]:
        try:
            contents = await resource_handler.read_resource(str(uri))
        except InvalidRequestError as e:
            raise McpError(ErrorData(code=INVALID_REQUEST, message=str(e))) from e
        return [ReadResourceContents(content=contents.text, mime_type=contents.mimeType)]

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        return tool_handler.list_tools()

    @server.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any] | None) -> list[TextContent]:
        return await tool_handler.call_tool(name, arguments)

    return server


async def serve(settings: Settings) -> None:
    """Run the server over stdio until the client disconnects."""
    server = create_server(settings=settings)
    logger.info("server_starting", anki_connect_url=settings.anki_connect_url)

    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    """Main entry point for the MCP server."""
    settings = get_settings()
    configure_logging(level=settings.log_level, json_output=settings.log_json)
    asyncio.run(serve(settings))


if __name__ == "__main__":
    main()
