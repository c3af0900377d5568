from dataclasses import dataclass, field

from .Types import Optional, none, some


@dataclass(frozen=True)
class Stream:
    """Read-only view over the input text with 1-based character lookup."""
    text: str
    length: int = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, 'length', len(self.text))

    def get(self, index: int) -> Optional[str]:
        """Character at 1-based `index`, or Nothing outside 1..len."""
        if index <= 0 or index > self.length:
            return none()
        return some(self.text[index - 1])

    def __str__(self) -> str:
        return self.text

    def __len__(self) -> int:
        return self.length
