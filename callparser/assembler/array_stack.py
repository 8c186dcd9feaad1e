"""
Array construction stack.

Builds the nested TypedArray for one array-typed argument while the
argument's brackets are being walked. The stack holds one ArrayFrame per
nesting level, outermost first. The first opening bracket of an argument
creates every level at once; later brackets for sibling elements only
recreate the levels that have since been closed.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..coercion import TypedArray
from ..errors import ArrayLengthError, ArrayShapeError
from ..type_system import ScalarType


@dataclass
class ArrayFrame:
    """One in-progress nesting level (level 1 is the innermost array)."""
    scalar: ScalarType
    level: int
    container: TypedArray
    expected_length: Optional[int] = None


class ArrayStack:
    """Frames for the array argument currently being built."""

    def __init__(self):
        self.frames: List[ArrayFrame] = []
        # Brackets currently open; frames past this index were created
        # ahead of time and have not been entered yet
        self.open = 0

    def __len__(self) -> int:
        return len(self.frames)

    @property
    def is_open(self) -> bool:
        return self.open > 0

    def reset(self) -> None:
        self.frames.clear()
        self.open = 0

    def open_level(
        self,
        scalar: ScalarType,
        depth: int,
        dimensions: Sequence[Optional[int]] = (),
    ) -> None:
        """Enter a bracket of an argument declared with ``depth`` array levels."""
        if self.open >= depth:
            raise ArrayShapeError(
                f'array nested deeper than the {depth} level(s) declared for {scalar.name}'
            )
        self.open += 1
        for index in range(len(self.frames), depth):
            level = depth - index
            expected = dimensions[level - 1] if level <= len(dimensions) else None
            self.frames.append(ArrayFrame(scalar, level, TypedArray(scalar, level), expected))

    def push_scalar(self, value) -> None:
        """Append a coerced scalar to the innermost array."""
        if not self.open or self.frames[self.open - 1].level != 1:
            raise ArrayShapeError('expected a nested array but got a scalar value')
        self.frames[self.open - 1].container.append(value)

    def close_level(self) -> Optional[TypedArray]:
        """
        Leave the innermost open bracket.

        Returns the finished container when the outermost bracket closes;
        otherwise appends the closed container to its parent and returns None.
        """
        if not self.open:
            raise ArrayShapeError('array end without a matching array start')
        # Levels created for this bracket but never entered stay empty
        del self.frames[self.open:]
        frame = self.frames.pop()
        self.open -= 1

        if frame.expected_length is not None and len(frame.container) != frame.expected_length:
            raise ArrayLengthError(
                f'{frame.container.type_name} requires {frame.expected_length} element(s), '
                f'got {len(frame.container)}'
            )

        if not self.frames:
            return frame.container
        self.frames[-1].container.append(frame.container)
        return None
