"""Entry point for ``python -m command_hub``."""

from command_hub import main

if __name__ == "__main__":
    main()
