"""Allow ``python -m create_fullstack_app``."""

from create_fullstack_app.pipeline import main

main()
