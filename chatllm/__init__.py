"""
chatllm - Language model provider layer for a chat-platform AI plugin.

Example:
    >>> from chatllm.adapters import new_language_model
    >>> from chatllm.domains.llm import Message, Role, ServiceConfig
    >>> llm = new_language_model(ServiceConfig(type="gemini", parameters=b'{"apiKey": "..."}'))
    >>> response = await llm.chat_completion([Message(role=Role.USER, content="Hi")])
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
