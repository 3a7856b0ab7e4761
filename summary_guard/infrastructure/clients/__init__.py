from .http_text_generator import HttpTextGenerator

__all__ = ["HttpTextGenerator"]
