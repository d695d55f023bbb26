from dataclasses import dataclass

from squeeze.text import squeeze


@dataclass(slots=True)
class Squeezable:
    text: str

    def squeeze(self, needle: str) -> str:
        """Return a squeezed copy; ``self.text`` is left unchanged."""
        return squeeze(self.text, needle)

    def squeeze_in_place(self, needle: str) -> None:
        self.text = squeeze(self.text, needle)

    def __str__(self) -> str:
        return self.text
