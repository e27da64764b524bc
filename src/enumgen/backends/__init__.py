"""Backends for enum source output (C#)."""

from .csharp_generator import BraceStyle, RenderOptions, generate_csharp, save_csharp_file

__all__ = ["BraceStyle", "RenderOptions", "generate_csharp", "save_csharp_file"]
