"""Statically enumerated language tags accepted for syntax highlighting."""

SUPPORTED_LANGUAGES: frozenset[str] = frozenset({
    "bash",
    "c",
    "c#",
    "c++",
    "clojure",
    "console",
    "cpp",
    "cs",
    "csharp",
    "css",
    "csv",
    "diff",
    "docker",
    "dockerfile",
    "go",
    "gql",
    "graphql",
    "html",
    "http",
    "java",
    "javascript",
    "js",
    "json",
    "jsx",
    "kotlin",
    "markdown",
    "md",
    "mdx",
    "mermaid",
    "objc",
    "objective-c",
    "perl",
    "perl6",
    "php",
    "proto",
    "py",
    "python",
    "rb",
    "ruby",
    "rust",
    "scala",
    "sh",
    "shell",
    "sql",
    "swift",
    "terraform",
    "ts",
    "tsx",
    "typescript",
    "xml",
    "yaml",
    "yml",
    "zsh",
})

# Tags whose Pygments lexer is registered under a different alias.
LEXER_ALIASES: dict[str, str] = {
    "c#": "csharp",
    "cs": "csharp",
    "c++": "cpp",
    "gql": "graphql",
    "mdx": "markdown",
    "yml": "yaml",
}


def is_supported_language(tag: object) -> bool:
    """Return True if tag is in the allow-list. Pure and case-sensitive."""
    return isinstance(tag, str) and tag in SUPPORTED_LANGUAGES


def lexer_name(tag: str) -> str:
    """Pygments alias to look up for a supported tag."""
    return LEXER_ALIASES.get(tag, tag)
