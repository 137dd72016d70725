from .builder import ElementBuilder
from .compiler import Compiler, compile_text
from .config import CompilerConfig, ErrorMode
from .context import CompilationContext, CompilationResult
from .reporter import ErrorReporter

__all__ = [
    "CompilationContext",
    "CompilationResult",
    "Compiler",
    "CompilerConfig",
    "ElementBuilder",
    "ErrorMode",
    "ErrorReporter",
    "compile_text",
]
