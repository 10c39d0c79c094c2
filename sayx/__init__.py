"""sayx — a small interactive command shell for the terminal.

Reads one command per line, dispatches it through a fixed command table and
frames every response in a bordered panel. Commands cover directory listing,
directory creation and removal, a scratch text editor, a file viewer, a
four-function calculator, the system calendar and message printing.

Usage:
    python -m sayx                      # Start the shell
    python -m sayx --no-banner          # Skip the welcome banner
    python -m sayx --editor-file notes  # Write 'edit' output to ./notes
"""

__version__ = "4.0.0"
