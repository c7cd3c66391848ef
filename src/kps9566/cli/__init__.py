"""Command line interface."""

from kps9566.cli.app import create_app

__all__ = ["create_app"]
