from dataclasses import asdict

from pydantic import BaseModel, Field

from ..chunk.base import Div, NinePatchChunk, Padding


class DivSchema(BaseModel):
    """A stretchable interval [start, stop)."""

    start: int
    stop: int


class PaddingSchema(BaseModel):
    """Content padding."""

    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0


class ChunkSchema(BaseModel):
    """JSON view of a nine-patch chunk."""

    kind: str | None = Field(default=None, description="How the source bitmap was classified")
    width: int | None = Field(default=None, description="Content width the chunk applies to")
    height: int | None = Field(default=None, description="Content height the chunk applies to")
    is_empty: bool = False
    x_divs: list[DivSchema] = Field(default_factory=list)
    y_divs: list[DivSchema] = Field(default_factory=list)
    padding: PaddingSchema = Field(default_factory=PaddingSchema)
    colors: list[str] = Field(
        default_factory=list,
        description="Region colors as #AARRGGBB hex, row-major",
    )

    @classmethod
    def from_chunk(
        cls,
        chunk: NinePatchChunk,
        kind: str | None = None,
        width: int | None = None,
        height: int | None = None,
    ) -> "ChunkSchema":
        return cls(
            kind=kind,
            width=width,
            height=height,
            is_empty=chunk.is_empty,
            x_divs=[DivSchema(start=d.start, stop=d.stop) for d in chunk.x_divs],
            y_divs=[DivSchema(start=d.start, stop=d.stop) for d in chunk.y_divs],
            padding=PaddingSchema(**asdict(chunk.padding)),
            colors=[f"#{c & 0xFFFFFFFF:08X}" for c in chunk.colors],
        )

    def to_chunk(self) -> NinePatchChunk:
        """Build a chunk back from this view."""
        return NinePatchChunk(
            x_divs=[Div(d.start, d.stop) for d in self.x_divs],
            y_divs=[Div(d.start, d.stop) for d in self.y_divs],
            padding=Padding(**self.padding.model_dump()),
            colors=[_parse_color(c) for c in self.colors],
        )


def _parse_color(value: str) -> int:
    raw = int(value.lstrip("#"), 16)
    return raw - 0x100000000 if raw & 0x80000000 else raw
