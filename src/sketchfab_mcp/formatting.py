"""
Text rendering for tool responses.

Turns catalog entries and search pages into the short plain-text blocks
returned to the agent, and builds default download file names.
"""

import re
import tempfile
from pathlib import Path
from typing import Optional

from .models import ModelFormat, SearchResults, SketchfabModel

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9]")


def yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


def format_model_for_display(model: SketchfabModel) -> str:
    """
    Format a model as a fixed multi-line block.

    Args:
        model: Catalog entry to render

    Returns:
        Name, ID, creator, downloadable flag, thumbnail and, when present,
        the description, one per line
    """
    lines = [
        f"[Model] {model.name}",
        f"ID: {model.uid}",
        f"Creator: {model.username or 'Unknown'}",
        f"Downloadable: {yes_no(model.is_downloadable)}",
        f"Thumbnail: {model.thumbnail_url or 'No thumbnail'}",
    ]
    if model.description:
        lines.append(f"Description: {model.description}")
    return "\n".join(lines)


def format_search_results(search: SearchResults) -> str:
    """Render a non-empty search page as a numbered listing."""
    entries = [
        f"[{index}] {model.name}\nID: {model.uid}\nDownloadable: {yes_no(model.is_downloadable)}\n"
        for index, model in enumerate(search.results, start=1)
    ]
    return f"Found {len(search.results)} models:\n\n" + "\n".join(entries)


def sanitize_model_name(name: str) -> str:
    """Replace every character outside [A-Za-z0-9] with an underscore, one for one."""
    return _UNSAFE_CHARS.sub("_", name)


def download_filename(model: SketchfabModel, model_id: str, fmt: ModelFormat) -> str:
    return f"{sanitize_model_name(model.name)}_{model_id}.{ModelFormat(fmt).value}"


def resolve_download_path(
    model: SketchfabModel,
    model_id: str,
    fmt: ModelFormat,
    output_path: Optional[str] = None,
    temp_dir: Optional[str] = None,
) -> Path:
    """
    Pick where a downloaded archive is written.

    An explicit output path is used verbatim. Otherwise the file goes to the
    system temp directory as ``<sanitized name>_<model_id>.<format>``, using
    the identifier the caller asked for.
    """
    if output_path:
        return Path(output_path)
    return Path(temp_dir or tempfile.gettempdir()) / download_filename(model, model_id, fmt)
