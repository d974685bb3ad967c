from .translator import TranslatorInterface

__all__ = ["TranslatorInterface"]
