"""Entry point kept minimal by delegating to Engine."""

from neon_glide.core.engine import Engine


def main():  # small wrapper for clarity / debuggers
    Engine().run()


if __name__ == "__main__":
    main()
