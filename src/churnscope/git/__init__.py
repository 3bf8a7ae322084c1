"""Blocking access to the git and wc command-line tools."""

from .runner import CommandRunner, repository_root

__all__ = ["CommandRunner", "repository_root"]
