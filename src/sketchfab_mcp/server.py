"""
Sketchfab MCP Server

MCP server that lets an AI agent search the Sketchfab catalog, inspect a
model, and download model archives to local disk.
"""

from typing import List, Literal, Optional

from mcp.server.fastmcp import FastMCP
from pydantic import Field
from typing_extensions import Annotated

from .auth import redact_token
from .client import SketchfabClient
from .config import SketchfabConfig
from .tools import ClientFactory, SketchfabTools

SERVER_NAME = "3d-model-mcp-server"

FormatName = Literal["gltf", "glb", "usdz", "source"]


def describe_config(config: SketchfabConfig) -> str:
    """Summarize configuration without exposing the API key."""
    key_status = redact_token(config.api_key) if config.api_key else "not configured"
    return f"""Sketchfab MCP Server Configuration:

API Base: {config.api_base}
API Key: {key_status}
Request Timeout: {config.request_timeout:g}s
Download Timeout: {config.download_timeout:g}s
Log Level: {config.log_level}
"""


def create_server(
    config: SketchfabConfig, client_factory: ClientFactory = SketchfabClient
) -> FastMCP:
    """
    Build the MCP server with every Sketchfab tool registered.

    Args:
        config: Configuration resolved at startup; handlers share it read-only
        client_factory: Builds the API client used by each tool call

    Returns:
        FastMCP server ready to run over stdio
    """
    mcp = FastMCP(SERVER_NAME)
    tools = SketchfabTools(config, client_factory)

    @mcp.tool(
        name="sketchfab-search",
        description="Search for 3D models on Sketchfab based on keywords and filters",
    )
    async def sketchfab_search(
        query: Annotated[
            Optional[str],
            Field(
                description='Text search query (e.g., "car", "house", "character") '
                "to find relevant models"
            ),
        ] = None,
        tags: Annotated[
            Optional[List[str]],
            Field(description='Filter by specific tags (e.g., ["animated", "rigged", "pbr"])'),
        ] = None,
        categories: Annotated[
            Optional[List[str]],
            Field(
                description='Filter by categories (e.g., ["characters", "architecture", "vehicles"])'
            ),
        ] = None,
        downloadable: Annotated[
            Optional[bool],
            Field(
                description="Set to true to show only downloadable models, "
                "false to show all models"
            ),
        ] = None,
        limit: Annotated[
            Optional[int],
            Field(description="Maximum number of results to return (1-24, default: 10)"),
        ] = None,
    ) -> str:
        return await tools.search(
            query=query,
            tags=tags,
            categories=categories,
            downloadable=downloadable,
            limit=limit,
        )

    @mcp.tool(
        name="sketchfab-model-details",
        description="Get detailed information about a specific Sketchfab model",
    )
    async def sketchfab_model_details(
        modelId: Annotated[  # noqa: N803 - wire name of the tool argument
            str,
            Field(description="The unique ID of the Sketchfab model (found in URLs or search results)"),
        ],
    ) -> str:
        return await tools.model_details(modelId)

    @mcp.tool(name="sketchfab-download", description="Download a 3D model from Sketchfab")
    async def sketchfab_download(
        modelId: Annotated[  # noqa: N803
            str,
            Field(description="The unique ID of the Sketchfab model to download (must be downloadable)"),
        ],
        format: Annotated[
            FormatName,
            Field(description="Preferred format to download the model in (defaults to gltf if available)"),
        ] = "gltf",
        outputPath: Annotated[  # noqa: N803
            Optional[str],
            Field(
                description="Local file path to save the downloaded file "
                "(will use temp directory if not specified)"
            ),
        ] = None,
    ) -> str:
        return await tools.download(modelId, format=format, output_path=outputPath)

    @mcp.resource("sketchfab://config")
    def get_server_config() -> str:
        """Get current Sketchfab MCP server configuration."""
        return describe_config(config)

    return mcp
