"""
Dependency providers for textbank

Usage:
    from textbank.dependencies import TranslatorDep

    @app.get("/greeting")
    def greeting(translator: TranslatorDep):
        return {"message": translator.text("Home/Greeting", "Hello")}
"""

from .providers import TranslatorDep, create_translator, get_translator

__all__ = ["TranslatorDep", "create_translator", "get_translator"]
