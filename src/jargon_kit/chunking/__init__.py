from .chunking import Chunk, ChunkKind, assemble_chunks

__all__ = [
    "Chunk",
    "ChunkKind",
    "assemble_chunks",
]
