"""
wsfinder: Workspace Directory Search

Locates workspace directories by fuzzy, language-aware name matching, including
Latin-letter queries against directory names written in Chinese characters.
"""

__version__ = "0.1.0"

__all__ = ["WorkspaceSearcher", "search_workspaces"]

def __getattr__(name):
    """Lazy import to avoid loading the pinyin dictionary on package import."""
    if name == "WorkspaceSearcher":
        from .searcher import WorkspaceSearcher
        return WorkspaceSearcher
    if name == "search_workspaces":
        from .searcher import search_workspaces
        return search_workspaces
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
