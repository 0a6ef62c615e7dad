"""
Caption document model
Blocks, documents and the timing operations applied to them
"""

import logging
from dataclasses import dataclass, field, replace
from typing import Iterable, List, Optional

from capshift.core.time_value import TimeValue
from capshift.exceptions import EmptyDocument, EndsBeforeStart, InvalidCropWindow

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CaptionBlock:
    """Represents a single caption entry"""

    start: TimeValue
    end: TimeValue
    text: str
    speaker: Optional[str] = None

    def __post_init__(self):
        if self.end < self.start:
            raise EndsBeforeStart(self.start, self.end)

    def offset(self, delta: int) -> "CaptionBlock":
        """Return a copy shifted by delta milliseconds"""
        return replace(self, start=self.start.offset(delta), end=self.end.offset(delta))


@dataclass
class Caption:
    """A parsed caption file: optional header plus blocks in presentation order"""

    blocks: List[CaptionBlock] = field(default_factory=list)
    header: Optional[str] = None

    def __len__(self) -> int:
        return len(self.blocks)

    def __iter__(self):
        return iter(self.blocks)

    def first_time(self) -> TimeValue:
        """Start of the first block"""
        if not self.blocks:
            raise EmptyDocument()
        return self.blocks[0].start

    def last_time(self) -> TimeValue:
        """End of the last block"""
        if not self.blocks:
            raise EmptyDocument()
        return self.blocks[-1].end

    def duration(self) -> int:
        """Milliseconds between the first start and the last end"""
        return self.last_time().to_milliseconds() - self.first_time().to_milliseconds()

    def speakers(self) -> List[str]:
        """Distinct speaker names in order of first appearance"""
        seen = []
        for block in self.blocks:
            if block.speaker is not None and block.speaker not in seen:
                seen.append(block.speaker)
        return seen

    def offset_all(self, delta: int) -> "Caption":
        """
        Shift every block by delta milliseconds

        Parameters:
            delta: Signed offset in milliseconds

        Returns:
            New Caption with the same header and shifted blocks

        Raises:
            NegativeTime: if any block would start before zero; no block is
                shifted in that case
        """
        # Every shifted block is built before the result is assembled, so a
        # failure anywhere leaves this caption as it was
        shifted = [block.offset(delta) for block in self.blocks]
        logger.debug("Shifted %d blocks by %+d ms", len(shifted), delta)
        return Caption(blocks=shifted, header=self.header)

    def crop(
        self, start: Optional[TimeValue] = None, end: Optional[TimeValue] = None
    ) -> "Caption":
        """
        Keep only the blocks that overlap the window [start, end]

        A missing bound leaves that side open. Blocks that cross a bound are
        clamped to it; times are not moved relative to zero.

        Raises:
            InvalidCropWindow: if both bounds are missing or start is after end
        """
        if start is None and end is None:
            raise InvalidCropWindow(start, end)
        if start is not None and end is not None and end < start:
            raise InvalidCropWindow(start, end)

        kept = []
        for block in self.blocks:
            if start is not None and block.end < start:
                continue
            if end is not None and block.start > end:
                continue

            new_start = block.start
            new_end = block.end
            if start is not None and new_start < start:
                new_start = start
            if end is not None and new_end > end:
                new_end = end
            kept.append(replace(block, start=new_start, end=new_end))

        logger.debug("Crop kept %d of %d blocks", len(kept), len(self.blocks))
        return Caption(blocks=kept, header=self.header)


def concatenate(captions: Iterable[Caption]) -> Caption:
    """
    Join captions one after another

    Each caption is shifted so it starts right after the previous caption's
    last end time. The result has no header.

    Raises:
        EmptyDocument: if any input caption has no blocks
    """
    blocks = []
    running_offset = 0

    for caption in captions:
        tail = caption.last_time().to_milliseconds()
        shifted = caption.offset_all(running_offset)
        blocks.extend(shifted.blocks)
        running_offset += tail

    logger.debug("Concatenated %d blocks", len(blocks))
    return Caption(blocks=blocks)
