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

import logging
from typing import Iterable

from .constants import UNSET
from .exon import Exon
from .strings.strand import Strand


def sort_exons(strand: Strand, exons: Iterable[Exon]) -> list[Exon]:
    """Sort exons from the 5' to the 3' end of the transcript"""

    return sorted(exons, key=lambda x: x.start, reverse=strand.is_minus)


class Transcript:
    __slots__ = {'transcript_id', 'strand', 'exons'}

    def __init__(self, transcript_id: str, strand: Strand, exons: Iterable[Exon]) -> None:
        self.transcript_id = transcript_id
        self.strand = strand
        self.exons = sort_exons(strand, exons)

        if len(set(exon.chromosome for exon in self.exons)) > 1:
            raise ValueError(f"Exons of transcript '{transcript_id}' span multiple chromosomes!")

        if any(exon.strand != strand for exon in self.exons):
            raise ValueError(f"Exons of transcript '{transcript_id}' on a different strand!")

    @property
    def coding_length(self) -> int:
        return sum(exon.coding_length for exon in self.exons)

    @property
    def coding_exons(self) -> list[Exon]:
        return [exon for exon in self.exons if exon.coding_length > 0]

    def assign_coding_offsets(self) -> None:
        """Number the coding exons and set their transcript offsets and reading frames"""

        offset = 0
        coding_exons = self.coding_exons
        for number, exon in enumerate(coding_exons, start=1):
            exon.number = number
            exon.mrna_base = offset
            exon.set_phase((3 - offset % 3) % 3)
            offset += exon.coding_length

        if offset % 3 != 0:
            logging.warning(
                "Coding length of transcript '%s' not a multiple of three (%d)!" %
                (self.transcript_id, offset))

        logging.debug(
            "Assigned coding offsets to %d exons of transcript '%s'." %
            (len(coding_exons), self.transcript_id))

    def get_exon_at(self, pos: int) -> Exon | None:
        for exon in self.exons:
            if pos in exon:
                return exon
        return None

    def get_amino_acid_number(self, pos: int) -> int:
        exon = self.get_exon_at(pos)
        return exon.get_amino_acid_number(pos) if exon else UNSET
