"""Free-form color tag entry."""

from dataclasses import dataclass, field

from stock_manager.domain.products import ColorTagSet


@dataclass
class ColorTagInput:
    """Text buffer feeding a ColorTagSet.

    Tags are never edited in place; changing one means remove then re-add.
    """

    tags: ColorTagSet = field(default_factory=ColorTagSet)
    text: str = ""

    def submit(self) -> bool:
        """Add the trimmed buffer as a tag and clear the buffer.

        Blank input is ignored and left in place; duplicates are dropped.
        """
        value = self.text.strip()
        if not value:
            return False
        if value in self.tags:
            self.text = ""
            return False
        self.tags.add(value)
        self.text = ""
        return True

    def remove(self, value: str) -> bool:
        """Delete a tag by exact value."""
        return self.tags.remove(value)
