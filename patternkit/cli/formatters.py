"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- JSON and YAML serialization
- Rich tables for catalogue listings
- List formatting for detailed views
"""

import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "yaml":
        return yaml.dump(data, default_flow_style=False, sort_keys=False)
    elif format_type == "table":
        return format_table_output(data)
    elif format_type == "list":
        return format_list_output(data)
    else:
        # Default to JSON
        return json.dumps(data, indent=2, default=str)


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "demos" in data:
        return format_demos_table(data["demos"])
    elif isinstance(data, dict) and "demo" in data:
        return format_demos_table([data["demo"]])
    # Fallback to JSON for unknown data structures
    return json.dumps(data, indent=2, default=str)


def format_list_output(data: Any) -> str:
    """Format data as a detailed list."""
    if isinstance(data, dict) and "demos" in data:
        return format_demos_list(data["demos"])
    elif isinstance(data, dict) and "demo" in data:
        return format_demos_list([data["demo"]])
    return json.dumps(data, indent=2, default=str)


def format_demos_table(demos: List[Dict[str, Any]]) -> str:
    """Format demonstrations as a Rich table."""
    if not demos:
        return "No demonstrations found."

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Tag", style="cyan", no_wrap=True)
    table.add_column("Pattern", style="green")
    table.add_column("Category", style="blue")
    table.add_column("Summary")

    for demo in demos:
        table.add_row(
            str(demo.get("tag", "N/A")),
            str(demo.get("title", "N/A")),
            str(demo.get("category", "N/A")),
            str(demo.get("summary", "")),
        )

    # Capture Rich output as string
    console = Console(width=120, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)
    return capture.get()


def format_demos_list(demos: List[Dict[str, Any]]) -> str:
    """Format demonstrations as a detailed list."""
    if not demos:
        return "No demonstrations found."

    blocks = []
    for demo in demos:
        blocks.append("\n".join([
            f"Tag:      {demo.get('tag', 'N/A')}",
            f"Pattern:  {demo.get('title', 'N/A')}",
            f"Category: {demo.get('category', 'N/A')}",
            f"Module:   {demo.get('module', 'N/A')}",
            f"Summary:  {demo.get('summary', '')}",
        ]))
    return "\n\n".join(blocks)
