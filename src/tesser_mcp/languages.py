"""Target languages for generated client code."""

from enum import Enum

from pydantic import BaseModel


class Language(str, Enum):
    TYPESCRIPT = "typescript"
    JAVASCRIPT = "javascript"
    PYTHON = "python"
    GO = "go"
    RUST = "rust"
    CPP = "cpp"


class LanguageConfig(BaseModel):
    name: str  # display name used in prompts and titles
    extension: str


LANGUAGE_CONFIG: dict[Language, LanguageConfig] = {
    Language.TYPESCRIPT: LanguageConfig(name="TypeScript", extension="ts"),
    Language.JAVASCRIPT: LanguageConfig(name="JavaScript", extension="js"),
    Language.PYTHON: LanguageConfig(name="Python", extension="py"),
    Language.GO: LanguageConfig(name="Go", extension="go"),
    Language.RUST: LanguageConfig(name="Rust", extension="rs"),
    Language.CPP: LanguageConfig(name="C++", extension="cpp"),
}


def language_config(language: Language | str) -> LanguageConfig:
    """Look up display name and extension. Raises ValueError for unknown values."""
    return LANGUAGE_CONFIG[Language(language)]
