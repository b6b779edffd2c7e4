import logging
from importlib.resources import files

from .interval import Interval
from .ordering import Comparison, compare
from .relation import Relation, classify

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Load documentation files for programmatic access by agents and code-aware tools
_docs_path = files(__package__) / "docs"
docs = {
    "readme": (_docs_path / "README.md").read_text(),
    "api": (_docs_path / "API.md").read_text(),
}

__all__ = [
    "Interval",
    "Relation",
    "classify",
    "Comparison",
    "compare",
    "docs",
]
