"""Machine-readable output for scripted and agent callers."""

from __future__ import annotations

from fitplan.agent.response import AgentResponse, create_response, error_response

__all__ = ["AgentResponse", "create_response", "error_response"]
