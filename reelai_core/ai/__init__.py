"""AI provider abstractions for transcription and extraction."""

from reelai_core.ai.base import AIClient, AIResponse, AIMessage
from reelai_core.ai.groq import GroqClient
from reelai_core.ai.openai import OpenAIClient

__all__ = ["AIClient", "AIResponse", "AIMessage", "GroqClient", "OpenAIClient"]
