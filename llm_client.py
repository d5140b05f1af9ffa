# llm_client.py
"""
Chat client for any server exposing an OpenAI-compatible /chat/completions
endpoint (vLLM, llama.cpp server, LM Studio, OpenAI itself).
"""
import logging

import requests

import config
from errors import GenerationError

logger = logging.getLogger(__name__)


class ChatCompletionsClient:
    def __init__(self, api_base: str = None, model: str = None, api_key: str = None,
                 timeout: int = None, temperature: float = None, max_tokens: int = None):
        settings = config.llm_config()
        self.api_base = api_base or settings["api_base"]
        self.model = model or settings["model"]
        self.api_key = api_key if api_key is not None else settings["api_key"]
        self.timeout = timeout or settings["timeout"]
        self.temperature = settings["temperature"] if temperature is None else temperature
        self.max_tokens = max_tokens or settings["max_tokens"]

    def chat(self, messages) -> str:
        payload = {
            "model": self.model,
            "messages": messages,
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }
        headers = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"

        url = f"{self.api_base.rstrip('/')}/chat/completions"
        try:
            resp = requests.post(url, json=payload, headers=headers, timeout=self.timeout)
            resp.raise_for_status()
            j = resp.json()
        except (requests.RequestException, ValueError) as e:
            raise GenerationError(f"Chat completion request to {url} failed: {e}") from e

        try:
            return j["choices"][0]["message"]["content"].strip()
        except (KeyError, IndexError, TypeError, AttributeError):
            if j.get("choices") and "text" in j["choices"][0]:
                return j["choices"][0]["text"].strip()
            if "text" in j:
                return j["text"].strip()
            raise GenerationError("Unexpected response format from chat completions server")


def build_llm_client(backend: str = None):
    """Pick the model client for `backend` ("http" or "transformers")."""
    backend = (backend or config.llm_backend()).lower()
    logger.info("Using %s language model backend", backend)

    if backend == "http":
        return ChatCompletionsClient()
    if backend == "transformers":
        from llm_loader import TransformersChatClient
        return TransformersChatClient(config.local_model_name())
    raise ValueError(f"Unknown LLM backend: {backend!r}")
