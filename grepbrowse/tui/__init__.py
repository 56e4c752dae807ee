"""
Terminal UI for browsing match lines.

A Textual-based list of producer matches; Enter opens the selected match in
$EDITOR at its line.

Usage:
    python -m grepbrowse grep -rn TODO src/

Components:
    - MatchBrowserApp: Main application class
    - MatchListScreen: Match list with status footer
    - SessionController: Selection and paging state
    - ActionDispatcher: Editor invocation around a suspended display
"""
