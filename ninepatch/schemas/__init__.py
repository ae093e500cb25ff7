from .chunk import ChunkSchema, DivSchema, PaddingSchema

__all__ = ["ChunkSchema", "DivSchema", "PaddingSchema"]
