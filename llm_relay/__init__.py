# LLM Relay Package
"""
Launcher plugin that streams chat-model output into the result list.

Modules:
  - config: API key, base URL and model from the environment
  - search.handlers.llm_query: Query handling and streaming updates
  - services.chat_client: OpenAI streaming client
"""

__version__ = "0.1.0-dev"
