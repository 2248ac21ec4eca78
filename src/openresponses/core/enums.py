"""Closed string enumerations used across the protocol."""

from __future__ import annotations

from typing import Literal

MessageRole = Literal["user", "assistant", "system", "developer"]
ItemStatus = Literal["in_progress", "completed", "incomplete"]
ImageDetail = Literal["low", "high", "auto"]
ReasoningEffort = Literal["none", "minimal", "low", "medium", "high", "xhigh"]
ReasoningSummary = Literal["concise", "detailed", "auto"]
ServiceTier = Literal["auto", "default", "flex", "priority"]
ToolChoice = Literal["none", "auto", "required"]
Truncation = Literal["auto", "disabled"]
Verbosity = Literal["low", "medium", "high"]
IncludeOption = Literal["reasoning.encrypted_content", "message.output_text.logprobs"]
ErrorType = Literal[
    "server_error",
    "invalid_request",
    "not_found",
    "model_error",
    "too_many_requests",
]
