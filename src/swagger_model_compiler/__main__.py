"""Module entry point for `python -m swagger_model_compiler`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
