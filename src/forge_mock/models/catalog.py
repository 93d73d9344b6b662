"""
Association reference data.

Servers expose tools, resources and prompts. The mock returns the same fixed
collections for every existing server; they are never affected by server
create, update or delete.
"""

from typing import Any, Dict, List, Optional, Tuple

from pydantic import Field

from .common import ApiModel


class Tool(ApiModel):
    id: str
    name: str
    description: Optional[str] = None
    input_schema: Optional[Dict[str, Any]] = None
    enabled: bool = True


class Resource(ApiModel):
    id: str
    uri: str
    name: str
    description: Optional[str] = None
    mime_type: Optional[str] = None
    is_active: bool = True


class PromptArgument(ApiModel):
    name: str
    description: Optional[str] = None
    required: Optional[bool] = None


class Prompt(ApiModel):
    id: str
    name: str
    description: Optional[str] = None
    template: str
    arguments: List[PromptArgument] = Field(default_factory=list)
    is_active: bool = True


TOOLS: Tuple[Tool, ...] = (
    Tool(id="tool-1", name="read_file", description="Read a file from the filesystem"),
    Tool(id="tool-2", name="write_file", description="Write content to a file"),
    Tool(id="tool-3", name="list_directory", description="List files in a directory"),
)

RESOURCES: Tuple[Resource, ...] = (
    Resource(
        id="resource-1",
        uri="file://config.json",
        name="file://config.json",
        description="Configuration file",
        mime_type="application/json",
    ),
    Resource(
        id="resource-2",
        uri="file://README.md",
        name="file://README.md",
        description="Readme file",
        mime_type="text/markdown",
    ),
)

PROMPTS: Tuple[Prompt, ...] = (
    Prompt(
        id="prompt-1",
        name="analyze-file",
        description="Analyze the contents of a file",
        template="Analyze the following file: {{file}}",
    ),
    Prompt(
        id="prompt-2",
        name="summarize-directory",
        description="Summarize contents of a directory",
        template="Summarize files in: {{directory}}",
    ),
)

SERVER_ASSOCIATIONS: Dict[str, Tuple[ApiModel, ...]] = {
    "tools": TOOLS,
    "resources": RESOURCES,
    "prompts": PROMPTS,
}
