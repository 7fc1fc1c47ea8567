"""Allow ``python -m finder``."""

from finder.main import main

main()
