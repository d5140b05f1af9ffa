# Local Hugging Face chat model, usable wherever a `chat(messages)` client is expected
# Assumes GPU (recommended) or a small model on CPU

import logging

from errors import GenerationError

logger = logging.getLogger(__name__)


class TransformersChatClient:
    def __init__(self, model_name: str, force_cpu: bool = False,
                 max_new_tokens: int = 256, temperature: float = 0.1):
        self.model_name = model_name
        self.force_cpu = force_cpu
        self.max_new_tokens = max_new_tokens
        self.temperature = temperature
        self.tokenizer = None
        self.model = None

    def load(self):
        """Lazily load tokenizer and model. Heavy libs are imported here
        to avoid import-time side effects (CUDA init) in minimal environments.
        """
        if self.model is not None:
            return self.tokenizer, self.model

        try:
            import torch
            from transformers import AutoModelForCausalLM, AutoTokenizer
        except ImportError as e:
            raise GenerationError(
                "transformers and torch are required for the local backend. "
                "Install with: pip install '.[local]'"
            ) from e

        if not self.force_cpu and torch.cuda.is_available():
            # device_map="auto" requires the accelerate package
            dtype = torch.float16
            device_map = "auto"
        else:
            dtype = torch.float32
            device_map = "cpu"

        logger.info("Loading %s on %s", self.model_name, device_map)
        try:
            self.tokenizer = AutoTokenizer.from_pretrained(self.model_name, trust_remote_code=True)
            self.model = AutoModelForCausalLM.from_pretrained(
                self.model_name,
                dtype=dtype,
                device_map=device_map,
                trust_remote_code=True
            )
        except Exception as e:
            raise GenerationError(f"Failed to load the model {self.model_name}: {e}") from e

        self.model.eval()
        return self.tokenizer, self.model

    def chat(self, messages) -> str:
        tokenizer, model = self.load()
        import torch

        input_text = tokenizer.apply_chat_template(
            messages,
            tokenize=False,
            add_generation_prompt=True
        )
        inputs = tokenizer(input_text, return_tensors="pt").to(model.device)

        with torch.no_grad():
            output = model.generate(
                **inputs,
                max_new_tokens=self.max_new_tokens,
                temperature=self.temperature,
                do_sample=self.temperature > 0,
                top_p=0.9
            )

        return tokenizer.decode(
            output[0][inputs["input_ids"].shape[-1]:],
            skip_special_tokens=True
        ).strip()
