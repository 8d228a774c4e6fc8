"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI:
- JSON and YAML documents
- Rich tables for pattern listings
"""

import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    elif format_type == "table":
        return format_table_output(data)
    else:
        # Default to JSON
        return json.dumps(data, indent=2, default=str)


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "patterns" in data:
        return format_patterns_table(data["patterns"])
    elif isinstance(data, dict) and "pattern" in data:
        return format_patterns_table([data["pattern"]])
    else:
        # Fallback to JSON for unknown data structures
        return json.dumps(data, indent=2, default=str)


def format_patterns_table(patterns: List[Dict[str, Any]]) -> str:
    """Format pattern entries as a Rich table."""
    if not patterns:
        return "No patterns found."

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Name", style="cyan")
    table.add_column("Category", style="green")
    table.add_column("Summary")

    for pattern in patterns:
        table.add_row(
            str(pattern.get("name", "N/A")),
            str(pattern.get("category", "N/A")),
            str(pattern.get("summary", "")),
        )

    # Capture Rich output as string
    console = Console(width=120, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)

    return capture.get()
