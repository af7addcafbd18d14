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
from typing import Optional

from .amino_acid_sequence import AminoAcidSequence
from .codon_table import CodonTable
from .constants import UNSET
from .errors import GenomicPositionOutOfBounds
from .sequence_provider import SequenceProvider
from .strings.strand import Strand
from .uint_range import UIntRange


class Exon:
    """
    Sub-region of a feature (e.g., a gene exon)

    The genomic range is 0-based and half-open; the coding region is a
    sub-range of it, by default the whole exon. Coordinate queries accept
    any position between the start and the end included.

    - reading_frame: offset of the first complete codon from the exon start
      (unset by default)
    - mrna_base: offset of the first translated base of the exon relative to
      the start of the spliced transcript (unset by default)
    - number: position of the exon among the coding exons of its transcript
      (one-based, zero if not numbered)
    """

    __slots__ = {
        '_chromosome',
        '_range',
        '_strand',
        '_coding_start',
        '_coding_end',
        '_utr',
        '_amino_acid_sequence',
        'reading_frame',
        'mrna_base',
        'number'
    }

    def __init__(self, chromosome: str, start: int, end: int, strand: Strand) -> None:
        self._chromosome = chromosome
        self._range = UIntRange(start, end)
        self._strand = strand

        # By default the entire exon is a coding region
        self._coding_start = start
        self._coding_end = end
        self._utr = False
        self._amino_acid_sequence: Optional[AminoAcidSequence] = None

        self.reading_frame = UNSET
        self.mrna_base = UNSET
        self.number = 0

    def __repr__(self) -> str:
        return (
            f"Exon({self.locus}, strand={self._strand.value}, "
            f"cds=[{self._coding_start}, {self._coding_end}), utr={self._utr})"
        )

    def __len__(self) -> int:
        return len(self._range)

    def __contains__(self, pos: int) -> bool:
        return self.start <= pos <= self.end

    @property
    def chromosome(self) -> str:
        return self._chromosome

    @property
    def start(self) -> int:
        return self._range.start

    @property
    def end(self) -> int:
        return self._range.end

    @property
    def strand(self) -> Strand:
        return self._strand

    @property
    def locus(self) -> str:
        return f"{self._chromosome}:{self.start + 1}-{self.end}"

    def _invalidate_amino_acid_sequence(self) -> None:
        self._amino_acid_sequence = None

    @property
    def utr(self) -> bool:
        """Whether the entire exon is untranslated"""

        return self._utr

    @utr.setter
    def utr(self, utr: bool) -> None:
        self._utr = utr
        if utr:

            # Collapse the coding region at the 3' end of the exon
            self._coding_start = self._coding_end = (
                self.end if self._strand.is_plus else
                self.start
            )

        self._invalidate_amino_acid_sequence()

    @property
    def coding_start(self) -> int:
        return self._coding_start

    @coding_start.setter
    def coding_start(self, pos: int) -> None:
        self._coding_start = self._range.clamp(pos)
        if self._coding_end < self._coding_start:
            self._coding_end = self._coding_start
        self._invalidate_amino_acid_sequence()

    @property
    def coding_end(self) -> int:
        return self._coding_end

    @coding_end.setter
    def coding_end(self, pos: int) -> None:
        self._coding_end = self._range.clamp(pos)
        if self._coding_start > self._coding_end:
            self._coding_start = self._coding_end
        self._invalidate_amino_acid_sequence()

    @property
    def coding_length(self) -> int:
        return 0 if self._utr else max(0, self._coding_end - self._coding_start)

    @property
    def coding_range(self) -> UIntRange:
        return UIntRange.from_length(self._coding_start, self.coding_length)

    def is_utr_at(self, pos: int) -> bool:
        return self._utr or pos < self._coding_start or pos > self._coding_end

    def set_phase(self, phase: int) -> None:
        """Set the reading frame from the phase of the coding region (GFF convention)"""

        if phase not in (0, 1, 2):
            raise ValueError(f"Invalid phase: {phase}!")

        match self._strand:
            case Strand.PLUS:
                self.reading_frame = phase
            case Strand.MINUS:
                self.reading_frame = (self.coding_length - phase) % 3
            case Strand.UNKNOWN:
                pass

    def get_amino_acid_number(self, pos: int) -> int:
        """
        Get the one-based index of the codon a genomic position falls into,
        relative to the translation start of the transcript

        Returns -1 if the transcript offset of the exon is unknown or the
        position precedes the first translated base, 0 on an unknown strand.
        """

        if pos not in self:
            raise GenomicPositionOutOfBounds(f"Position {pos} out of exon {self.locus}!")

        if self.mrna_base < 0:
            return UNSET

        match self._strand:
            case Strand.PLUS:
                mrna_pos = self.mrna_base + (pos - self._coding_start) - 1
            case Strand.MINUS:
                mrna_pos = self.mrna_base + (self._coding_end - pos)
            case Strand.UNKNOWN:
                return 0

        return UNSET if mrna_pos < 0 else mrna_pos // 3 + 1

    def get_read_range(self) -> UIntRange | None:
        """Get the genomic range to translate, if it spans more than one codon"""

        if self.reading_frame < 0:
            return None

        read_start = (
            self._coding_start if self._coding_start > self.start else
            self.start + self.reading_frame
        )
        read_end = min(self.end, self._coding_end)

        return UIntRange(read_start, read_end) if read_end > read_start + 3 else None

    def get_amino_acid_sequence(
        self,
        sequence_provider: SequenceProvider,
        codon_table: CodonTable
    ) -> AminoAcidSequence | None:
        if self._amino_acid_sequence is None:
            self._amino_acid_sequence = self._compute_amino_acid_sequence(
                sequence_provider, codon_table)
        return self._amino_acid_sequence

    def _compute_amino_acid_sequence(
        self,
        sequence_provider: SequenceProvider,
        codon_table: CodonTable
    ) -> AminoAcidSequence | None:
        if self._utr:
            return None

        r = self.get_read_range()
        if r is None:
            logging.debug("No translatable range in exon %s." % self.locus)
            return None

        seq = sequence_provider.get_sequence(self._chromosome, r.start, r.end)
        if not seq:
            logging.debug("Sequence at %s:%d-%d not available." % (self._chromosome, r.start, r.end))
            return None

        return codon_table.translate_sequence(seq, r.start, self._strand)

    def copy(self) -> Exon:
        exon = Exon(self._chromosome, self.start, self.end, self._strand)
        exon._coding_start = self._coding_start
        exon._coding_end = self._coding_end
        exon._amino_acid_sequence = self._amino_acid_sequence
        return exon
