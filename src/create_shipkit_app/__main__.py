"""Allow running the generator with ``python -m create_shipkit_app``."""

from create_shipkit_app.cli.main import main

if __name__ == "__main__":
    main()
