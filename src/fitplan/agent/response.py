"""JSON envelope wrapping every CLI result.

Scripts and agents calling ``fitplan --json`` always get the same top-level
shape, whether the command produced a plan or rejected its input.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

SCHEMA_VERSION = "1.0"


@dataclass
class AgentResponse:
    """Envelope for one CLI command result."""

    success: bool
    command: str
    data: dict[str, Any] = field(default_factory=dict)
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)
    human_summary: str = ""
    error_code: Optional[str] = None
    schema_version: str = SCHEMA_VERSION

    def to_dict(self) -> dict[str, Any]:
        result = {
            "success": self.success,
            "command": self.command,
            "data": self.data,
            "errors": self.errors,
            "warnings": self.warnings,
            "suggestions": self.suggestions,
            "human_summary": self.human_summary,
            "timestamp": datetime.now().isoformat(),
            "schema_version": self.schema_version,
        }
        if self.error_code:
            result["error_code"] = self.error_code
        return result

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)


def create_response(
    command: str,
    data: Optional[dict[str, Any]] = None,
    warnings: Optional[list[str]] = None,
    suggestions: Optional[list[str]] = None,
    human_summary: str = "",
) -> AgentResponse:
    """Wrap a successful plan or listing.

    Args:
        command: CLI command name (e.g. "meal", "catalog list")
        data: Command result, usually a plan's ``to_dict()``
        warnings: Fallbacks the caller should know about
        suggestions: Follow-up commands worth trying
        human_summary: One-line description

    Returns:
        AgentResponse with success=True
    """
    return AgentResponse(
        success=True,
        command=command,
        data=data or {},
        warnings=warnings or [],
        suggestions=suggestions or [],
        human_summary=human_summary,
    )


def error_response(
    command: str,
    error: str,
    code: Optional[str] = None,
    suggestions: Optional[list[str]] = None,
) -> AgentResponse:
    """Wrap a rejected request.

    Args:
        command: CLI command name
        error: Error message
        code: Machine-readable code such as ``INVALID_DURATION``
        suggestions: How to fix the input

    Returns:
        AgentResponse with success=False
    """
    return AgentResponse(
        success=False,
        command=command,
        errors=[error],
        suggestions=suggestions or [],
        human_summary=f"Error: {error}",
        error_code=code,
    )
