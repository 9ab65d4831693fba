"""Detect the .NET SDK version in use for a directory and render it for a prompt."""

__version__ = "0.1.0"
__all__ = ["cli", "dotnet"]