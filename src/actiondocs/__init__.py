__version__ = "0.1.0"

__all__ = [
    "__version__",
    "cli",
    "compose",
    "config",
    "core",
    "examples",
    "formatter",
    "generate",
    "loader",
    "models",
    "splice",
    "tables",
]
