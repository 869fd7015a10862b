"""gfont - Normalize and re-serialize web-font @font-face style sheets.

gfont parses the @font-face CSS served by web-font APIs (Google Fonts in
particular) into structured font-face records, lets you query, merge and
persist them as JSON, and writes them back as CSS, optionally consolidating
several single-format faces into one legacy-compatible rule.

Example:
    $ gfont download -t Domine -s 'wght@400;700' | gfont parse -i - -o domine.json
    $ gfont css -i domine.json -c -H
"""

__version__ = "1.0.0"

__all__ = ["__version__"]
