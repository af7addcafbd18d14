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

from dataclasses import dataclass
import logging
from typing import Dict, List, Optional, Protocol

from .uint_range import UIntRange


class SequenceProvider(Protocol):
    def get_sequence(self, chromosome: str, start: int, end: int) -> Optional[str]:
        """Get the bases of a 0-based half-open genomic range, if available"""
        ...


def _normalise_sequence(sequence: str) -> str:

    # Remove soft-masking
    return sequence.upper()


@dataclass(init=False)
class SequenceRepository:
    """In-memory registry of reference sequence regions"""

    __slots__ = {'_regions'}

    _regions: Dict[str, List[tuple[UIntRange, str]]]

    def __init__(self) -> None:
        self._regions = {}

    def register_sequence(self, chromosome: str, start: int, sequence: str) -> None:
        if not chromosome or start < 0:
            raise ValueError("Invalid genomic position!")

        r = UIntRange.from_length(start, len(sequence))
        if chromosome not in self._regions:
            self._regions[chromosome] = []
        self._regions[chromosome].append((r, _normalise_sequence(sequence)))
        logging.debug("Registered reference sequence at %s:%d-%d." % (chromosome, r.start, r.end))

    def get_sequence(self, chromosome: str, start: int, end: int) -> Optional[str]:
        if chromosome not in self._regions or start < 0 or end < start:
            return None

        query = UIntRange(start, end)
        for r, sequence in self._regions[chromosome]:
            if query in r:
                return sequence[query.to_slice(r.start)]

        return None
