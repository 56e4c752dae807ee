"""
grepbrowse - browse line-numbered search results and open them in an editor.

Usage:
    grepbrowse grep -rn pattern src/
    python -m grepbrowse git grep -n pattern
"""

__version__ = "0.1.0"
