"""Compilation domain exports."""

from .compilation_use_case import (
    CompilationError,
    build_model_store,
    compile_configured_specification,
    compile_specification,
)
from .compile_contracts import CompilationOutcome, CompileRequest

__all__ = [
    "CompileRequest",
    "CompilationOutcome",
    "CompilationError",
    "build_model_store",
    "compile_configured_specification",
    "compile_specification",
]
