"""Language model boundary layer."""

from docrag.boundary.llm.completion_gateway import CompletionGateway, create_completion_gateway

__all__ = ["CompletionGateway", "create_completion_gateway"]
