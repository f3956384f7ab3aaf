"""Allow `python -m web_ui`."""

from .cli import main

if __name__ == "__main__":
    main()
