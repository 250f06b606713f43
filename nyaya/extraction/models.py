from dataclasses import dataclass


@dataclass(frozen=True)
class SourceDocument:
    """An uploaded file as received at the request boundary."""

    data: bytes
    mime_type: str
    filename: str = ""

    @property
    def size(self) -> int:
        return len(self.data)
