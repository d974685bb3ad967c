"""
Translator Interface
Contract consumed by framework adapters (validators, view helpers, API responses)
"""

from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence


class TranslatorInterface(ABC):
    """
    Service for retrieving translated text, with support for fallbacks and format args.
    """

    @abstractmethod
    def text(
        self,
        key: str,
        fallback: Optional[str] = None,
        args: Optional[Sequence[Any]] = None,
    ) -> str:
        """
        Return translated text by its key, in the active language.

        Args:
            key: The key to find a translation
            fallback: Text to use if no translation was found
            args: Positional format arguments for the translated text

        Returns:
            Translated (and formatted) text
        """
        raise NotImplementedError

    @abstractmethod
    def text_in(
        self,
        language: str,
        key: str,
        fallback: Optional[str] = None,
        args: Optional[Sequence[Any]] = None,
    ) -> str:
        """
        Return translated text by its key, in a specific language.

        Args:
            language: The language for translation
            key: The key to find a translation
            fallback: Text to use if no translation was found
            args: Positional format arguments for the translated text

        Returns:
            Translated (and formatted) text
        """
        raise NotImplementedError
