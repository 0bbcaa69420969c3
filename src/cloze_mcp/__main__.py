"""Allow ``python -m cloze_mcp``."""

from cloze_mcp.main import run

run()
