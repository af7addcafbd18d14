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

from .strings.strand import Strand
from .strings.translation_symbol import TranslationSymbol
from .uint_range import UIntRange


@dataclass(slots=True, frozen=True)
class AminoAcidSequence:
    """
    Translation of a genomic range

    - strand: orientation of the translation
    - start: 0-based genomic position the translated bases were read from
    - length: number of genomic bases read (including any trailing partial codon)
    - symbols: amino acids in transcript order (5' to 3')
    """

    strand: Strand
    start: int
    length: int
    symbols: tuple[TranslationSymbol, ...]

    def __len__(self) -> int:
        return len(self.symbols)

    def __str__(self) -> str:
        return ''.join(aa.letter for aa in self.symbols)

    @property
    def end(self) -> int:
        return self.start + self.length

    def get_codon_range(self, index: int) -> UIntRange:
        """Get the genomic range of the codon translated into the amino acid at the given index"""

        if not 0 <= index < len(self.symbols):
            raise IndexError(f"Amino acid index {index} out of range!")

        offset = 3 * index
        match self.strand:
            case Strand.MINUS:
                codon_end = self.end - offset
                return UIntRange(codon_end - 3, codon_end)
            case Strand.PLUS | Strand.UNKNOWN:
                return UIntRange.from_length(self.start + offset, 3)
