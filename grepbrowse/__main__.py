"""Allow ``python -m grepbrowse``."""

from grepbrowse.tui.app import main

if __name__ == "__main__":
    main()
