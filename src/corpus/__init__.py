from .loader import load_text, write_text
from .sample import DEFAULT_SAMPLE_SIZE, DEFAULT_VOCABULARY, generate_sample_text

__all__ = [
    "DEFAULT_SAMPLE_SIZE",
    "DEFAULT_VOCABULARY",
    "generate_sample_text",
    "load_text",
    "write_text",
]
