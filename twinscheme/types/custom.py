from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CustomType:
    """Opaque handle to host state kept in an Environment's extension registry.

    The handle itself is a plain value: `tag` selects the per-tag store and
    `identifier` indexes into it (see Environment.set_custom/get_custom).
    """
    tag: str
    identifier: str

    def __str__(self) -> str:
        return f"#<{self.tag}:{self.identifier}>"
