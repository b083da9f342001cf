"""Entry point: python -m forgesetup"""

from forgesetup.cli import main

if __name__ == "__main__":
    main()
