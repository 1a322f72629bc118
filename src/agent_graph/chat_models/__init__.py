# agent_graph/chat_models/__init__.py
from .base import BaseChatModel
from .config import ChatModelConfig
from .openai_model import OpenAIChatModel

__all__ = ["BaseChatModel", "ChatModelConfig", "OpenAIChatModel"]
