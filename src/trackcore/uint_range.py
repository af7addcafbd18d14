########## LICENCE ##########
# trackcore
# Copyright (C) 2024 Genome Research Ltd
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as
# published by the Free Software Foundation, either version 3 of the
# License, or (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
#############################

from __future__ import annotations

from collections.abc import Container
from dataclasses import dataclass
from typing import Sized

from .utils import clamp


@dataclass(slots=True, frozen=True)
class UIntRange(Sized, Container):
    """Half-open range of 0-based positions"""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid range [{self.start}, {self.end})!")

    def __len__(self) -> int:
        return self.end - self.start

    def __repr__(self) -> str:
        return f"[{self.start}, {self.end})"

    def __contains__(self, x) -> bool:
        if isinstance(x, int):
            return self.start <= x < self.end
        elif isinstance(x, UIntRange):
            return self.start <= x.start and x.end <= self.end
        raise TypeError("Operand type not supported!")

    def clamp(self, pos: int) -> int:
        """Clamp a position to the closed interval between the range boundaries"""

        return clamp(pos, self.start, self.end)

    @classmethod
    def from_length(cls, start: int, length: int) -> UIntRange:
        if length < 0:
            raise ValueError("Invalid range length: negative!")
        return cls(start, start + length)

    def to_slice(self, offset: int = 0) -> slice:
        return slice(self.start - offset, self.end - offset)
